from .doc import (
    AlwaysBreak,
    Annotated,
    Concat,
    Doc,
    FlatChoice,
    Fill,
    Group,
    Nest,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
    validate_text,
)
from .utils import intersperse


def text(x):
    """Returns ``x`` as a Doc. Raises ``TypeError`` if ``x``
    is not a str and ``ValueError`` if it contains a line break."""
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    return cast_doc(x)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return validate_text(doc)

    raise ValueError(doc)


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. To lay out the doc on a single line, the `when_flat`
    branch of ``FlatChoice`` is used."""
    return Group(cast_doc(doc))


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    docs = list(docs)
    if not docs:
        return NIL
    elif len(docs) == 1:
        return cast_doc(docs[0])
    return Concat([cast_doc(doc) for doc in docs])


def annotate(annotation, doc):
    """Annotates ``doc`` with the arbitrary value``annotation``"""
    return Annotated(cast_doc(doc), annotation)


def nest(i, doc):
    return Nest(i, cast_doc(doc))


def stack(upper, lower):
    """Places ``lower`` below ``upper``. The line between them
    is flattened to a space when an enclosing group fits on
    one line."""
    return concat([upper, LINE, lower])


def hsep(docs):
    return concat(intersperse(' ', docs))


def vsep(docs):
    return concat(intersperse(LINE, docs))


def fillsep(docs):
    return Fill(intersperse(LINE, map(cast_doc, docs)))


def fill(docs):
    return Fill(map(cast_doc, docs))


def always_break(doc):
    """Instructs the layout algorithm that ``doc`` must be
    broken to multiple lines. This instruction propagates
    to all higher levels in the layout, but nested Docs
    may still be laid out flat."""
    return AlwaysBreak(cast_doc(doc))


def flat_choice(when_broken, when_flat):
    """Gives the layout algorithm two options. ``when_flat`` Doc will be
    used when the document fit onto a single line, and ``when_broken`` is used
    when the Doc had to be broken into multiple lines."""
    return FlatChoice(cast_doc(when_broken), cast_doc(when_flat))
