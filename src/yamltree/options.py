from attrs import field, frozen, validators


@frozen
class FormatOptions:
    """Layout settings shared by the parser and the serializer.

    Notes:
      - `indent_width` is the number of spaces one nesting level adds. Literal
        block content is expected at exactly one level deeper than its key.
      - Files indented with another width than the configured one are not
        reliably parsed; over-indented lines are skipped.
    """

    indent_width: int = field(default=2, validator=validators.gt(0))


DEFAULT_OPTIONS = FormatOptions()
