import dataclasses
import logging
from collections.abc import MutableMapping, MutableSequence
from enum import Enum

from .interface import Interface

_registered_storage = {}


class VariantMismatch(TypeError):
    pass


class UnsupportedVariant(TypeError):
    pass


class StorageType(Enum):
    """The storage strategy of a set variant.

    MAP: Elements are the keys of a mapping.
    SEQUENCE: Elements are the items of an append-only sequence.
    AGGREGATE: A dataclass of fixed shape holding the elements in its fields.

    """
    MAP = 1
    SEQUENCE = 2
    AGGREGATE = 3


def register_storage(storage, classes=None):
    """Register the storage strategy of one or more set variants.

    Variants deriving from a mutable mapping, a mutable sequence or a dataclass
    are recognised without registration. Registered strategies take precedence
    and are inherited by subclasses. If `classes` is omitted, a decorator is
    returned, such that

        .. highlight:: python
        .. code-block:: python

            @register_storage(StorageType.MAP)
            class WordSet(Interface):
                def __init__(self):
                    self._words = {}
                ...

    Args:
        storage (StorageType): The storage strategy.
        classes (type, tuple, optional): The class or classes to register.

    Returns:
        The decorator when `classes` is None, otherwise `classes`.

    """
    storage = StorageType(storage)
    if classes is None:
        def register(cls):
            register_storage(storage, cls)
            return cls
        return register

    if isinstance(classes, (tuple, list)):
        for cl in classes:
            register_storage(storage, cl)
    else:
        previous = _registered_storage.get(classes)
        if previous is not None and previous is not storage:
            import warnings
            warnings.warn("Replacing {} storage of '{}' with {}.".format(previous.name, classes.__name__,
                                                                        storage.name), RuntimeWarning, stacklevel=2)
        _registered_storage[classes] = storage
    return classes


def get_storage(cls):
    """Return the :class:`StorageType` of the set variant `cls`.

    Raises:
        UnsupportedVariant: If `cls` is not an :class:`Interface` or its storage
            cannot be reconstructed generically.

    """
    if not (isinstance(cls, type) and issubclass(cls, Interface)):
        raise UnsupportedVariant("Unsupported set type: {}".format(_type_name(cls)))

    for base in cls.__mro__:
        if base in _registered_storage:
            storage = _registered_storage[base]
            # Aggregates are reconstructed from their dataclass fields.
            if storage is StorageType.AGGREGATE and not dataclasses.is_dataclass(cls):
                break
            return storage

    if issubclass(cls, MutableMapping):
        return StorageType.MAP
    if issubclass(cls, MutableSequence):
        return StorageType.SEQUENCE
    if dataclasses.is_dataclass(cls):
        return StorageType.AGGREGATE
    raise UnsupportedVariant("Unsupported set type: {}".format(_type_name(cls)))


def check_variants(s, t):
    """Ensure `s` and `t` are sets of the same concrete variant.

    Raises:
        VariantMismatch: If the types differ, or if `s` and `t` are aggregates
            of different shape.
        UnsupportedVariant: If the variant's storage is not supported.

    """
    s_type = type(s)
    t_type = type(t)
    if s_type is not t_type:
        raise VariantMismatch("Set types {} and {} do not match".format(s_type.__name__, t_type.__name__))

    storage = get_storage(s_type)
    if storage is StorageType.AGGREGATE and t is not s:
        s_shape = _shape(s)
        t_shape = _shape(t)
        if s_shape != t_shape:
            raise VariantMismatch("Set types {}({}) and {}({}) do not match".format(
                s_type.__name__, _format_shape(s_shape), t_type.__name__, _format_shape(t_shape)))
    return storage


def same_variant(s, t):
    """Return True if `s` and `t` are of the same type and, for aggregates, the same shape."""
    if type(s) is not type(t):
        return False
    if dataclasses.is_dataclass(s) and t is not s:
        return _shape(s) == _shape(t)
    return True


def new_set(s, t=None, capacity=0):
    """Create a new, empty set of the same concrete type as `s`.

    If `t` is given, it must be a set of the same variant as `s`.

    Args:
        s (Interface): The reference set.
        t (Interface, optional): A second reference set.
        capacity (int, optional): A hint for the number of elements the new set
            will receive. Does not affect the result.

    Returns:
        Interface: An empty set of type ``type(s)``, sharing no storage with `s` or `t`.

    Raises:
        VariantMismatch: If `s` and `t` are different variants.
        UnsupportedVariant: If the storage of the variant cannot be reconstructed.

    """
    if t is None:
        storage = get_storage(type(s))
    else:
        storage = check_variants(s, t)

    cls = type(s)
    if storage is StorageType.AGGREGATE:
        r = cls(**_shape(s))
    else:
        r = cls()
    logging.debug("Created empty %s with %s storage (capacity hint %d)", cls.__name__, storage.name, capacity)
    return r


def _shape(s):
    """The init fields of the aggregate `s` which have no default."""
    shape = {}
    for field in dataclasses.fields(s):
        if not field.init:
            continue
        if field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:
            continue
        shape[field.name] = getattr(s, field.name)
    return shape


def _format_shape(shape):
    return ", ".join("{}={!r}".format(k, v) for k, v in shape.items())


def _type_name(cls):
    return getattr(cls, "__name__", repr(cls))
