"""Resolves a Doc into a stream of simple documents (SDocs).

The layout algorithm keeps an explicit stack of
``(indent, mode, doc)`` triples, with the next doc to be
laid out at the end of the stack. Each Group is laid out
flat if its flattened contents, followed by whatever comes
after it up to the next line break, fit in the remaining
width; otherwise its lines are broken. The fitting check
stops as soon as the width is exceeded or a line break is
reached, so its cost is bounded by the page width rather
than by the size of the document.
"""

from .doc import (
    Annotated,
    AlwaysBreak,
    Concat,
    Fill,
    FlatChoice,
    Group,
    HardLine,
    Nest,
    NIL,
    normalize_doc,
)
from .sdoc import (
    SDoc,
    SLine,
    SAnnotationPush,
    SAnnotationPop,
)


BREAK_MODE = 'BREAK_MODE'
FLAT_MODE = 'FLAT_MODE'


class FillTail:
    """The items of a Fill from index ``start`` onwards.
    Lets the layout walk a Fill without copying its items."""
    __slots__ = ('docs', 'start')

    def __init__(self, docs, start):
        self.docs = docs
        self.start = start

    def __repr__(self):
        return f'FillTail({repr(self.docs)}, {self.start})'


def fits(chars_left, triplestack, rest=()):
    """Returns True if the docs in ``triplestack``, followed by
    the docs in ``rest`` up to the first line break, can be laid
    out within ``chars_left`` columns.

    ``triplestack`` is consumed; ``rest`` is only read, starting
    from its end."""
    rest_idx = len(rest)

    while chars_left >= 0:
        if not triplestack:
            if rest_idx == 0:
                return True
            rest_idx -= 1
            triplestack.append(rest[rest_idx])

        indent, mode, doc = triplestack.pop()

        if doc is NIL:
            continue
        elif isinstance(doc, str):
            chars_left -= len(doc)
        elif isinstance(doc, Concat):
            triplestack.extend(
                (indent, mode, child)
                for child in reversed(doc.docs)
            )
        elif isinstance(doc, Annotated):
            triplestack.append((indent, mode, doc.doc))
        elif isinstance(doc, FlatChoice):
            if mode is FLAT_MODE:
                triplestack.append((indent, mode, doc.when_flat))
            elif mode is BREAK_MODE:
                triplestack.append((indent, mode, doc.when_broken))
            else:
                raise ValueError(mode)
        elif isinstance(doc, Nest):
            triplestack.append((indent + doc.indent, mode, doc.doc))
        elif isinstance(doc, Group):
            triplestack.append((indent, mode, doc.doc))
        elif isinstance(doc, HardLine):
            # Everything up to the line break fit.
            return True
        elif isinstance(doc, AlwaysBreak):
            triplestack.append((indent, BREAK_MODE, doc.doc))
        elif isinstance(doc, Fill):
            triplestack.append((indent, mode, FillTail(doc.docs, 0)))
        elif isinstance(doc, FillTail):
            # One item at a time, so the check can stop early.
            if doc.start < len(doc.docs):
                triplestack.append(
                    (indent, mode, FillTail(doc.docs, doc.start + 1))
                )
                triplestack.append((indent, mode, doc.docs[doc.start]))
        elif isinstance(doc, SDoc):
            continue
        else:
            raise ValueError((indent, mode, doc))

    return False


def layout_smart(doc, width=79):
    """Lays out ``doc`` to fit ``width`` columns where possible,
    yielding ``str`` values, ``SLine`` instances for line breaks
    and annotation push/pop markers."""
    doc = normalize_doc(doc)

    column = 0
    stack = [(0, BREAK_MODE, doc)]

    while stack:
        indent, mode, doc = stack.pop()

        if doc is NIL:
            continue
        elif isinstance(doc, str):
            yield doc
            column += len(doc)
        elif isinstance(doc, Concat):
            stack.extend(
                (indent, mode, child)
                for child in reversed(doc.docs)
            )
        elif isinstance(doc, Annotated):
            yield SAnnotationPush(doc.annotation)
            stack.append((indent, mode, SAnnotationPop(doc.annotation)))
            stack.append((indent, mode, doc.doc))
        elif isinstance(doc, SAnnotationPop):
            yield doc
        elif isinstance(doc, FlatChoice):
            if mode is FLAT_MODE:
                stack.append((indent, mode, doc.when_flat))
            elif mode is BREAK_MODE:
                stack.append((indent, mode, doc.when_broken))
            else:
                raise ValueError(mode)
        elif isinstance(doc, Nest):
            stack.append((indent + doc.indent, mode, doc.doc))
        elif isinstance(doc, HardLine):
            yield SLine(indent)
            column = indent
        elif isinstance(doc, Group):
            if mode is FLAT_MODE or fits(
                width - column,
                [(indent, FLAT_MODE, doc.doc)],
                stack,
            ):
                stack.append((indent, FLAT_MODE, doc.doc))
            else:
                stack.append((indent, BREAK_MODE, doc.doc))
        elif isinstance(doc, AlwaysBreak):
            stack.append((indent, BREAK_MODE, doc.doc))
        elif isinstance(doc, Fill):
            _layout_fill(
                doc.docs, 0, indent, mode, width - column, stack
            )
        elif isinstance(doc, FillTail):
            _layout_fill(
                doc.docs, doc.start, indent, mode, width - column, stack
            )
        else:
            raise ValueError((indent, mode, doc))


def _layout_fill(docs, start, indent, mode, chars_left, stack):
    # docs alternate content and separators; items before
    # ``start`` have already been laid out.
    remaining = len(docs) - start
    if remaining <= 0:
        return

    if mode is FLAT_MODE:
        stack.append((indent, mode, FillTail(docs, start + 1)))
        stack.append((indent, mode, docs[start]))
        return

    content = docs[start]
    content_fits = fits(chars_left, [(indent, FLAT_MODE, content)])
    content_mode = FLAT_MODE if content_fits else BREAK_MODE

    if remaining == 1:
        stack.append((indent, content_mode, content))
        return

    separator = docs[start + 1]

    if remaining == 2:
        stack.append((indent, content_mode, separator))
        stack.append((indent, content_mode, content))
        return

    next_content = docs[start + 2]
    pair_fits = fits(
        chars_left,
        [
            (indent, mode, FillTail(docs, start + 3)),
            (indent, FLAT_MODE, next_content),
            (indent, FLAT_MODE, separator),
            (indent, FLAT_MODE, content),
        ],
        stack,
    )

    stack.append((indent, mode, FillTail(docs, start + 2)))
    stack.append(
        (indent, FLAT_MODE if pair_fits else BREAK_MODE, separator)
    )
    stack.append((indent, content_mode, content))
