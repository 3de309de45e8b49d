from io import StringIO

from .sdoc import SLine


def default_render_to_stream(stream, sdocs, newline='\n', separator=' '):
    # Indentation is written lazily so that blank lines
    # carry no trailing whitespace.
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


def default_render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    default_render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()
