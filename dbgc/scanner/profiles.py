"""Language profiles - comment syntax, literal rules and output call targets.

CRITICAL: This file should contain ONLY configuration constants and lookups.
NO scanning logic. The reconstructor and classifier stay language-agnostic and
read everything syntax-specific from a LanguageProfile.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LiteralRule:
    """How one kind of string literal opens, escapes and spans lines."""

    delimiter: str
    escapes: bool = True
    multiline: bool = False


@dataclass(frozen=True)
class LanguageProfile:
    """Syntax and call-target defaults for one host language."""

    name: str
    extensions: tuple[str, ...]
    line_comment: str = "//"
    block_comment: tuple[str, str] | None = ("/*", "*/")
    literals: tuple[LiteralRule, ...] = (LiteralRule('"'),)
    char_literals: bool = True
    splices_comments: bool = False
    output_targets: frozenset[str] = field(default_factory=frozenset)
    debug_targets: frozenset[str] = field(default_factory=frozenset)
    stream_targets: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # Longest delimiter first so '"""' wins over '"'
        ordered = tuple(sorted(self.literals, key=lambda r: len(r.delimiter), reverse=True))
        object.__setattr__(self, "literals", ordered)


# =============================================================================
# KEYWORDS
# =============================================================================

# Words that may be followed by '(' but never name a call
NON_CALL_KEYWORDS: frozenset[str] = frozenset({
    "if",
    "elif",
    "else",
    "for",
    "foreach",
    "while",
    "switch",
    "case",
    "catch",
    "return",
    "sizeof",
    "alignof",
    "typeof",
    "defined",
    "match",
    "when",
    "with",
    "synchronized",
    "assert",
    "not",
    "and",
    "or",
    "in",
    "yield",
    "await",
    "lambda",
})


# =============================================================================
# OUTPUT CALL TARGETS
# =============================================================================

C_OUTPUT_TARGETS = frozenset({
    "printf",
    "fprintf",
    "sprintf",
    "snprintf",
    "printf_debug",
    "dprintf",
    "puts",
    "fputs",
    "fputc",
    "putchar",
    "fputchar",
    "write",
    "perror",
})

CPP_OUTPUT_TARGETS = C_OUTPUT_TARGETS | frozenset({
    "std::printf",
    "std::fprintf",
    "std::puts",
    "fmt::print",
    "fmt::println",
    "std::print",
    "std::println",
})

CPP_STREAM_TARGETS = frozenset({
    "std::cout",
    "std::cerr",
    "std::clog",
    "cout",
    "cerr",
    "clog",
})

GO_OUTPUT_TARGETS = frozenset({
    "fmt.Print",
    "fmt.Println",
    "fmt.Printf",
    "fmt.Fprint",
    "fmt.Fprintln",
    "fmt.Fprintf",
    "fmt.Sprint",
    "fmt.Sprintln",
    "fmt.Sprintf",
    "log.Print",
    "log.Println",
    "log.Printf",
    "log.Fatal",
    "log.Fatalln",
    "log.Fatalf",
    "log.Panic",
    "log.Panicln",
    "log.Panicf",
    "print",
    "println",
})

_RUST_LOG_MACROS = ("trace!", "debug!", "info!", "warn!", "error!")

RUST_OUTPUT_TARGETS = frozenset({
    "println!",
    "print!",
    "eprintln!",
    "eprint!",
    "format!",
    "write!",
    "writeln!",
    *_RUST_LOG_MACROS,
    *(f"log::{m}" for m in _RUST_LOG_MACROS),
    *(f"tracing::{m}" for m in _RUST_LOG_MACROS),
})

RUST_DEBUG_TARGETS = frozenset({"dbg!"})

_JAVA_STREAM_METHODS = ("println", "print", "printf", "format")
_LOGGER_METHODS = ("trace", "debug", "info", "warn", "warning", "error", "fine", "finer", "finest")
_LOGGER_NAMES = ("logger", "LOGGER", "log", "LOG")

JAVA_OUTPUT_TARGETS = frozenset({
    *(f"System.out.{m}" for m in _JAVA_STREAM_METHODS),
    *(f"System.err.{m}" for m in _JAVA_STREAM_METHODS),
    *(f"Log.{m}" for m in ("v", "d", "i", "w", "e", "wtf")),
    *(f"{name}.{m}" for name in _LOGGER_NAMES for m in _LOGGER_METHODS),
})

JAVASCRIPT_OUTPUT_TARGETS = frozenset({
    *(f"console.{m}" for m in ("log", "debug", "info", "warn", "error", "trace", "dir", "table")),
    *(f"{name}.{m}" for name in _LOGGER_NAMES for m in _LOGGER_METHODS),
})

PYTHON_OUTPUT_TARGETS = frozenset({
    "print",
    "pprint",
    "pprint.pprint",
    *(f"logging.{m}" for m in ("debug", "info", "warning", "error", "critical", "exception")),
    *(f"{name}.{m}" for name in _LOGGER_NAMES for m in (*_LOGGER_METHODS, "critical", "exception")),
    "sys.stdout.write",
    "sys.stderr.write",
})

PYTHON_DEBUG_TARGETS = frozenset({
    "breakpoint",
    "pdb.set_trace",
    "ipdb.set_trace",
})


# =============================================================================
# PROFILES
# =============================================================================

C_PROFILE = LanguageProfile(
    name="c",
    extensions=(".c", ".h"),
    splices_comments=True,
    output_targets=C_OUTPUT_TARGETS,
)

CPP_PROFILE = LanguageProfile(
    name="cpp",
    extensions=(".cpp", ".hpp", ".cc", ".cxx", ".hh", ".hxx"),
    splices_comments=True,
    output_targets=CPP_OUTPUT_TARGETS,
    stream_targets=CPP_STREAM_TARGETS,
)

GO_PROFILE = LanguageProfile(
    name="go",
    extensions=(".go",),
    literals=(
        LiteralRule('"'),
        LiteralRule("`", escapes=False, multiline=True),
    ),
    output_targets=GO_OUTPUT_TARGETS,
)

RUST_PROFILE = LanguageProfile(
    name="rust",
    extensions=(".rs",),
    literals=(LiteralRule('"', multiline=True),),
    output_targets=RUST_OUTPUT_TARGETS,
    debug_targets=RUST_DEBUG_TARGETS,
)

JAVA_PROFILE = LanguageProfile(
    name="java",
    extensions=(".java",),
    literals=(
        LiteralRule('"""', multiline=True),
        LiteralRule('"'),
    ),
    output_targets=JAVA_OUTPUT_TARGETS,
)

JAVASCRIPT_PROFILE = LanguageProfile(
    name="javascript",
    extensions=(".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"),
    literals=(
        LiteralRule('"'),
        LiteralRule("'"),
        LiteralRule("`", multiline=True),
    ),
    char_literals=False,
    output_targets=JAVASCRIPT_OUTPUT_TARGETS,
)

PYTHON_PROFILE = LanguageProfile(
    name="python",
    extensions=(".py",),
    line_comment="#",
    block_comment=None,
    literals=(
        LiteralRule('"""', multiline=True),
        LiteralRule("'''", multiline=True),
        LiteralRule('"'),
        LiteralRule("'"),
    ),
    char_literals=False,
    output_targets=PYTHON_OUTPUT_TARGETS,
    debug_targets=PYTHON_DEBUG_TARGETS,
)

PROFILES: dict[str, LanguageProfile] = {
    p.name: p
    for p in (
        C_PROFILE,
        CPP_PROFILE,
        GO_PROFILE,
        RUST_PROFILE,
        JAVA_PROFILE,
        JAVASCRIPT_PROFILE,
        PYTHON_PROFILE,
    )
}

_BY_EXTENSION: dict[str, LanguageProfile] = {
    ext: profile for profile in PROFILES.values() for ext in profile.extensions
}

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(_BY_EXTENSION)


def get_profile(name: str) -> LanguageProfile:
    """Look up a profile by language name."""
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(f"Unknown language '{name}'. Known: {', '.join(sorted(PROFILES))}") from None


def profile_for_path(path: str | Path) -> LanguageProfile | None:
    """Pick the profile for a file by its extension, or None if unsupported."""
    return _BY_EXTENSION.get(Path(path).suffix.lower())
