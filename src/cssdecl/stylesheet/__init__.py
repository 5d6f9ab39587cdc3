from cssdecl.stylesheet.registry import StyleSheet, split_class_names, strip_comments
from cssdecl.stylesheet.source import DirectoryTextSource, MappingTextSource, TextSource

__all__ = [
    "StyleSheet",
    "strip_comments",
    "split_class_names",
    "TextSource",
    "DirectoryTextSource",
    "MappingTextSource",
]
