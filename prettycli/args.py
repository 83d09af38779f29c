"""
Lightweight option parsing over plain token lists.

parse_args() reads leading `-name value` options and `-flag` switches into an
explicit result. getopt() and getswitchopt() pull individual options out of
a mutable argv list from any position, including GNU-style `--name=value`.
"""

from dataclasses import dataclass, field

from prettycli.exceptions import CliError


@dataclass(frozen=True)
class ParsedArgs:
    """Result of parse_args(): option values plus the unconsumed tokens."""

    options: dict = field(default_factory=dict)
    rest: list = field(default_factory=list)

    def __getitem__(self, name):
        return self.options[name]


@dataclass(frozen=True)
class OptResult:
    """Result of getopt()/getswitchopt(). Truthy when the option was found."""

    found: bool
    value: object = None

    def __bool__(self):
        return self.found


def parse_args(args, defaults, flags=()):
    """Parse leading options from *args*.

    defaults: mapping of option name -> default value; matched as `-name value`.
    flags: names of boolean switches; matched as `-name`, default False.

    Scanning stops at the first token that is not a known option, or after
    a `--` token (which is consumed). *args* itself is not modified.
    """
    options = dict(defaults)
    for name in flags:
        options[name] = False
    value_opts = {f"-{name}": name for name in defaults}
    flag_opts = {f"-{name}": name for name in flags}

    tokens = list(args)
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok == "--":
            i += 1
            break
        if tok in value_opts:
            if i + 1 >= len(tokens):
                raise CliError(f"[ERROR] Option {tok} requires a value.")
            options[value_opts[tok]] = tokens[i + 1]
            i += 2
        elif tok in flag_opts:
            options[flag_opts[tok]] = True
            i += 1
        else:
            break
    return ParsedArgs(options=options, rest=tokens[i:])


def _is_gnu_name(name):
    return name.startswith("--") and name.endswith("=")


def getopt(argv, names, default=None, takes_value=True):
    """Find and remove the first option in *argv* matching one of *names*.

    Names are tried in order. A name ending in "=" (e.g. "--width=") matches
    a token starting with it and takes the text after the first "=" as the
    value. Other names match a token exactly and take the next token as the
    value when *takes_value* is set (None if the option is the last token).

    *argv* is modified in place. Returns OptResult(found, value); value is
    *default* when nothing matched.
    """
    if isinstance(names, str):
        names = [names]
    for name in names:
        if _is_gnu_name(name):
            for pos, tok in enumerate(argv):
                if tok.startswith(name):
                    del argv[pos]
                    value = tok.split("=", 1)[1] if takes_value else None
                    return OptResult(True, value)
        elif name in argv:
            pos = argv.index(name)
            value = None
            if takes_value and pos + 1 < len(argv):
                value = argv[pos + 1]
                del argv[pos : pos + 2]
            else:
                del argv[pos]
            return OptResult(True, value)
    return OptResult(False, default)


def getswitchopt(argv, names, value=False):
    """Find and remove a switch from *argv*; a found switch inverts *value*.

    Returns OptResult(found, new_value).
    """
    result = getopt(argv, names, takes_value=False)
    if result:
        return OptResult(True, not value)
    return OptResult(False, value)
