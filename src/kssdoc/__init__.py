"""Style guide sections extracted from documented stylesheets."""

__version__ = "0.1.0"

from kssdoc.annotations import Annotation, parse_annotations
from kssdoc.comments import BlockState, CommentBlock, find_comment_blocks
from kssdoc.parser import SourceInput, StyleGuideParser, parse
from kssdoc.schemas import Modifier, Parameter, ParseOptions, Section, SourceFile
from kssdoc.styleguide import StyleGuide
from kssdoc.traverse import traverse

__all__ = [
    "Annotation",
    "BlockState",
    "CommentBlock",
    "Modifier",
    "Parameter",
    "ParseOptions",
    "Section",
    "SourceFile",
    "SourceInput",
    "StyleGuide",
    "StyleGuideParser",
    "find_comment_blocks",
    "parse",
    "parse_annotations",
    "traverse",
]
