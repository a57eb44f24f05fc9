from itertools import chain
from setuptools import setup

extras = {
    'test': ['pytest>=3.10', 'flake8', 'coverage'],
}
# 'all' includes all of the above
extras['all'] = list(chain(*extras.values()))

setup(name='setalgebra',
      version='2026.0.0',
      description='Type-preserving set algebra over any conforming collection type.',
      author='Kamil Kisiel',
      license='BSD-3-Clause',
      packages=['setalgebra',
                'numpy_setalgebra'],
      package_dir={'setalgebra': 'setalgebra',
                   'numpy_setalgebra': 'numpy_setalgebra'},
      install_requires=['numpy'],
      extras_require=extras
      )
