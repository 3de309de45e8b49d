from ..sdoc import (
    SLine,
    SAnnotationPush,
    SAnnotationPop,
)
from ..syntax import Token

_COLOR_DEPS_INSTALLED = True
try:
    from pygments import token
    from pygments import styles
except ImportError:
    _COLOR_DEPS_INSTALLED = False
else:
    _SYNTAX_TOKEN_TO_PYGMENTS_TOKEN = {
        Token.KEYWORD: token.Keyword,
        Token.KEYWORD_CONSTANT: token.Keyword.Constant,
        Token.KEYWORD_DECLARATION: token.Keyword.Declaration,
        Token.KEYWORD_NAMESPACE: token.Keyword.Namespace,
        Token.NAME_CLASS: token.Name.Class,
        Token.NAME_FUNCTION: token.Name.Function,
        Token.NAME_NAMESPACE: token.Name.Namespace,
        Token.NAME_VARIABLE: token.Name.Variable,
        Token.LITERAL_STRING: token.String,
        Token.NUMBER: token.Number,
        Token.OPERATOR: token.Operator,
        Token.PUNCTUATION: token.Punctuation,
    }

    default_style = styles.get_style_by_name('monokai')

try:
    import colorful
except ImportError:
    _COLOR_DEPS_INSTALLED = False


def styleattrs_to_colorful(attrs):
    c = colorful.reset
    if attrs['color'] or attrs['bgcolor']:
        # Colorful doesn't have a way to directly set Hex/RGB
        # colors- until I find a better way, we do it like this :)
        accessor = ''
        if attrs['color']:
            colorful.update_palette({'ktprintCurrFg': attrs['color']})
            accessor = 'ktprintCurrFg'
        if attrs['bgcolor']:
            colorful.update_palette({'ktprintCurrBg': attrs['bgcolor']})
            accessor += '_on_ktprintCurrBg'
        c &= getattr(colorful, accessor)
    if attrs['bold']:
        c &= colorful.bold
    if attrs['italic']:
        c &= colorful.italic
    if attrs['underline']:
        c &= colorful.underline
    return c


def colored_render_to_stream(stream, sdocs, style, newline='\n', separator=' '):
    if not _COLOR_DEPS_INSTALLED:
        raise ImportError(
            "'pygments' and 'colorful' packages must be "
            "installed to use colored output."
        )

    if style is None:
        style = default_style

    colorstack = []
    pending_indent = None

    for sdoc in sdocs:
        if isinstance(sdoc, str):
            if not sdoc:
                continue
            if pending_indent is not None:
                stream.write(separator * pending_indent)
                pending_indent = None
            stream.write(sdoc)
        elif isinstance(sdoc, SLine):
            stream.write(newline)
            pending_indent = sdoc.indent
        elif isinstance(sdoc, SAnnotationPush):
            if isinstance(sdoc.value, Token):
                pygments_token = _SYNTAX_TOKEN_TO_PYGMENTS_TOKEN[sdoc.value]
                tokenattrs = style.style_for_token(pygments_token)
                color = styleattrs_to_colorful(tokenattrs)
                colorstack.append(color)
                stream.write(str(color))

        elif isinstance(sdoc, SAnnotationPop):
            if not isinstance(sdoc.value, Token):
                continue

            colorstack.pop()

            if colorstack:
                stream.write(str(colorstack[-1]))
            else:
                stream.write(str(colorful.reset))

    if colorstack:
        stream.write(str(colorful.reset))
