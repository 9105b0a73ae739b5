# indexcodec/errors.py


class FramingError(ValueError):
    """
    A length field (or a VarByte integer) claims more data than the buffer holds.
    Raised by every decoder in the package; never recovered from.
    """
