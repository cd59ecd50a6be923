"""
The base16 "ocean dark" palette as a pygments style.

Base16 colors, by slot:

    base00 #2b303b  background
    base03 #65737e  comments
    base05 #c0c5ce  default foreground
    base08 #bf616a  tags, variables
    base09 #d08770  numbers, constants, attributes
    base0A #ebcb8b  classes
    base0B #a3be8c  strings
    base0C #96b5b4  escapes, regexes
    base0D #8fa1b3  functions
    base0E #b48ead  keywords
"""

from __future__ import annotations

from pygments.style import Style
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Literal,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
    Token,
    Whitespace,
)
from rich.syntax import PygmentsSyntaxTheme

BACKGROUND = "#2b303b"
FOREGROUND = "#c0c5ce"


class Base16OceanDarkStyle(Style):
    background_color = BACKGROUND
    highlight_color = "#343d46"

    styles = {
        Token: FOREGROUND,
        Text: FOREGROUND,
        Whitespace: FOREGROUND,
        Error: "#bf616a",
        Comment: "#65737e",
        Comment.Preproc: "#65737e",
        Keyword: "#b48ead",
        Keyword.Constant: "#d08770",
        Keyword.Type: "#ebcb8b",
        Operator: FOREGROUND,
        Punctuation: FOREGROUND,
        Name: FOREGROUND,
        Name.Attribute: "#d08770",
        Name.Builtin: "#bf616a",
        Name.Class: "#ebcb8b",
        Name.Constant: "#d08770",
        Name.Entity: "#d08770",
        Name.Function: "#8fa1b3",
        Name.Namespace: "#ebcb8b",
        Name.Tag: "#bf616a",
        Name.Variable: "#bf616a",
        Literal: "#d08770",
        Number: "#d08770",
        String: "#a3be8c",
        String.Escape: "#96b5b4",
        String.Regex: "#96b5b4",
        Generic.Deleted: "#bf616a",
        Generic.Inserted: "#a3be8c",
        Generic.Heading: "bold #8fa1b3",
        Generic.Subheading: "#96b5b4",
        Generic.Emph: "italic",
        Generic.Strong: "bold",
    }


THEME = PygmentsSyntaxTheme(Base16OceanDarkStyle)
