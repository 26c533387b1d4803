import os
import re

from pydoc import locate

from setuptools import setup
from setuptools.command.install import install


def get_version():
    module_init = 'rgbfusion/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)



class SdkInfo(install):

    @staticmethod
    def generate():
        hw = locate('rgbfusion.hardware.Hardware')
        assert hw is not None

        info = ""
        for hw_type in hw.Type:
            sdk = hw.get_type(hw_type)
            info += '%s: %s\n' % (hw_type.name.lower(), sdk.library)
            for name, symbol in sorted(sdk.symbols.items()):
                info += '  %s = %s\n' % (name, symbol)
            info += '\n'

        return info


    def run(self):
        print(SdkInfo.generate())


setup(name='rgbfusion',
      version=get_version(),
      description='Color control for GIGABYTE RGB Fusion motherboards and peripherals',
      license='LGPL',
      platform='Windows',
      packages=['rgbfusion', 'rgbfusion.client', 'rgbfusion.device'],
      package_data={'rgbfusion': ['data/*.yaml']},
      entry_points={
          'console_scripts': [
              'rgbfusion = rgbfusion.client.main:cli_entry'
          ]
      },
      install_requires=['argcomplete', 'colorlog', 'coloraide', 'numpy',
                        'ruamel.yaml', 'wrapt'],
      extras_require={'test': ['pytest']},
      cmdclass={'sdkinfo': SdkInfo},
      keywords='gigabyte rgb fusion led motherboard',
      python_requires='>=3.8',
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Environment :: Console',
          'Intended Audience :: End Users/Desktop',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: Microsoft :: Windows',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: System :: Hardware :: Hardware Drivers'
      ])
