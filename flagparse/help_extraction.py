"""
Lazy extraction of inline comments for help text.

Options declared without a ``description`` fall back to the inline comment
written next to the field. Extraction is deferred until the help message is
actually rendered, so parsing never pays for reading source files.
"""
import ast
import inspect
import io
import textwrap
import tokenize


def _build_comment_map(source: str) -> dict[int, str]:
    """Build a map of line numbers to inline comments."""
    comment_map = {}
    tokens = tokenize.generate_tokens(io.StringIO(source).readline)
    for tok_type, tok_str, start, _, _ in tokens:
        if tok_type == tokenize.COMMENT:
            comment_map[start[0]] = tok_str.lstrip("# ").strip()
    return comment_map


def _last_line(node: ast.AST) -> int:
    # option(...) calls may be split over several lines, the comment
    # usually sits on the closing one.
    return getattr(node, "end_lineno", None) or node.lineno


def extract_field_help_from_class(cls) -> dict[str, str]:
    """Extract inline comments from class field definitions."""
    # Inherit field_help from parent classes
    field_help = {}
    for base in reversed(cls.__mro__[1:]):
        parent_help = getattr(base, "__field_help__", None)
        if parent_help is not None and isinstance(parent_help, dict):
            field_help.update(parent_help)

    try:
        source = textwrap.dedent(inspect.getsource(cls))
        comment_map = _build_comment_map(source)
        source_ast = ast.parse(source)

        class_def = source_ast.body[0]
        for node in class_def.body:
            if isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
                help_msg = comment_map.get(node.lineno) or comment_map.get(
                    _last_line(node)
                )
                if help_msg:
                    field_help[node.target.id] = help_msg
    except (OSError, TypeError, IndexError, SyntaxError, tokenize.TokenError):
        pass

    return field_help


class LazyFieldHelp:
    """Descriptor that lazily extracts field help on first access."""

    def __init__(self, extractor=extract_field_help_from_class):
        self._extractor = extractor

    def __get__(self, obj, cls):
        if cls is None:
            return self
        cache_attr = "_cached_field_help"
        # look only at the class itself, parents cache their own help
        if cache_attr not in cls.__dict__:
            setattr(cls, cache_attr, self._extractor(cls))
        return cls.__dict__[cache_attr]
