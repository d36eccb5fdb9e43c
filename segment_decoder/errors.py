"""Exceptions raised while parsing and decoding display readings."""


class SegmentDecoderError(Exception):
    """Base class for all decoder failures."""


class FormatError(SegmentDecoderError):
    """A record does not match `<10 patterns> | <4 patterns>`."""


class DecodeError(SegmentDecoderError):
    """The wiring of a record could not be deduced or applied."""
