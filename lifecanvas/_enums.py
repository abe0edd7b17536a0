"""
The enums used in lifecanvas. For internal use, and for users to use for
typing and documentation.
"""

__all__ = ["RunState"]


class EnumType(type):
    """Metaclass for enums and flags."""

    def __new__(cls, name, bases, dct):
        # Collect and check fields
        member_map = {}
        for key, val in dct.items():
            if not key.startswith("_"):
                val = key if val is None else val
                if not isinstance(val, str):
                    raise TypeError("Enum fields must be str.")
                member_map[key] = val
        # Some field values may have been updated
        dct.update(member_map)
        # Create class
        klass = super().__new__(cls, name, bases, dct)
        # Store some meta data
        klass.__fields__ = tuple(member_map)
        return klass

    def __iter__(cls):
        return iter(cls.__fields__)

    def __len__(cls):
        return len(cls.__fields__)

    def __contains__(cls, value):
        return value in cls.__fields__

    def __repr__(cls):
        if cls.__name__.startswith("_"):
            return "<lifecanvas.enums>"
        options = ", ".join(f"'{x}'" for x in cls.__fields__)
        return f"<lifecanvas.enums.{cls.__name__} enum with options: {options}>"

    def __setattr__(cls, name, value):
        if name.startswith("_"):
            super().__setattr__(name, value)
        else:
            raise RuntimeError("Cannot set values on an enum.")


class BaseEnum(metaclass=EnumType):
    """Base class for enums."""

    def __init__(self):
        raise RuntimeError("Connot instantiate an enum.")


# ----- Specific enums


class RunState(BaseEnum):
    """The RunState enum specifies whether an animator is stepping on its own."""

    paused = None  #: Generations are only computed on request, e.g. via ``advance()``.
    running = None  #: Generations are computed periodically, at the animator's target speed.
