"""String helpers for IRC clients: formatting markup, identifier
validation, case folding, and wildcard matching."""


from .case_mapping import fold_case
from .formatting import apply_format, strip_format_tokens, strip_control_bytes
from .validation import is_valid_channel, is_valid_nick, is_valid_user
from .wildcard import glob, has_wildcard
