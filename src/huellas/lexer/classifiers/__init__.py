"""Line classifiers for the Huellas lexer.

Each classifier is a mixin that decides whether a single line belongs to a
particular block type. They run in a fixed priority order and the first one
to claim a line wins.
"""

from huellas.lexer.classifiers.code import CodeClassifierMixin
from huellas.lexer.classifiers.heading import HeadingClassifierMixin
from huellas.lexer.classifiers.link_ref import LinkRefClassifierMixin
from huellas.lexer.classifiers.list import ListClassifierMixin
from huellas.lexer.classifiers.setext import SetextClassifierMixin
from huellas.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "CodeClassifierMixin",
    "HeadingClassifierMixin",
    "LinkRefClassifierMixin",
    "ListClassifierMixin",
    "SetextClassifierMixin",
    "ThematicClassifierMixin",
]
