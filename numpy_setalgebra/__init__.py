# flake8: noqa

import setalgebra
__version__ = setalgebra.__version__
__license__ = setalgebra.__license__

from .bitset import BitSet
