from setuptools import setup


def find_version(path):
    import re
    # path shall be a plain ascii text file.
    with open(path, 'rt') as f:
        s = f.read()
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              s, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Version not found")

setup(name='hashkeys', version=find_version("hashkeys/version.py"),
      description='64-bit hash keys, prime bucket counts and gray codes',
      package_dir = {'hashkeys': 'hashkeys'},
      packages = ['hashkeys', 'hashkeys.tests'],
      include_package_data = True,
      license='MIT',
      python_requires='>=3.8',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
