#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_document_transforms.py
"""Tests for the structural passes: front matter, emoji and source lines."""

import pytest

from wechatmd.ast import Code, Document, FrontMatter, Heading, Image, Link, Paragraph, Text
from wechatmd.parsers import markdown_to_ast
from wechatmd.transforms import EmojiShortcodeTransform, SourceLineAnnotator, StripFrontMatterTransform
from wechatmd.transforms.frontmatter import decode_front_matter, strip_front_matter

from utils import collect_nodes


@pytest.mark.unit
class TestFrontMatter:
    """Tests for front-matter stripping."""

    def test_strips_yaml_block(self):
        doc = strip_front_matter(markdown_to_ast("---\ntitle: Demo\ntags: [a, b]\n---\n\n# Body"))
        assert not any(isinstance(child, FrontMatter) for child in doc.children)
        assert isinstance(doc.children[0], Heading)
        assert doc.metadata["front_matter"] == {"title": "Demo", "tags": ["a", "b"]}

    def test_strips_toml_block(self):
        doc = strip_front_matter(markdown_to_ast('+++\ntitle = "Demo"\n+++\n\nBody'))
        assert doc.metadata["front_matter"] == {"title": "Demo"}
        assert len(doc.children) == 1

    def test_undecodable_block_still_stripped(self):
        doc = strip_front_matter(markdown_to_ast("---\n: [unbalanced\n---\n\nBody"))
        assert not any(isinstance(child, FrontMatter) for child in doc.children)
        assert "front_matter" not in doc.metadata

    def test_original_document_untouched(self):
        original = markdown_to_ast("---\na: 1\n---\n\nBody")
        StripFrontMatterTransform().transform(original)
        assert isinstance(original.children[0], FrontMatter)

    def test_decode_non_mapping(self):
        assert decode_front_matter(FrontMatter(content="- a\n- b\n")) is None
        assert decode_front_matter(FrontMatter(content="   ")) is None


def _document(*inlines):
    return Document(children=[Paragraph(content=list(inlines))])


@pytest.mark.unit
class TestEmoji:
    """Tests for emoji shortcode expansion."""

    def test_expands_known_shortcode(self):
        doc = EmojiShortcodeTransform().transform(_document(Text(content="Ship :rocket:")))
        assert doc.children[0].content[0].content == "Ship \U0001f680"

    def test_unknown_shortcode_kept(self):
        doc = EmojiShortcodeTransform().transform(_document(Text(content=":not_an_emoji_x:")))
        assert doc.children[0].content[0].content == ":not_an_emoji_x:"

    @pytest.mark.parametrize("text", ["Nice :-)", "ok :) fine", "see 8) and (:"])
    def test_emoticons_left_as_text(self, text):
        doc = EmojiShortcodeTransform().transform(_document(Text(content=text)))
        assert doc.children[0].content[0].content == text

    def test_inline_code_untouched(self):
        doc = EmojiShortcodeTransform().transform(_document(Code(content=":rocket:")))
        assert doc.children[0].content[0] == Code(content=":rocket:")


@pytest.mark.unit
class TestSourceLineAnnotator:
    """Tests for source-line annotation."""

    def test_annotates_blocks_and_inline_targets(self):
        doc = markdown_to_ast("# Title\n\nSee [link](https://x.com)\n\n![img](https://x.com/a.png)")
        SourceLineAnnotator().annotate(doc)

        heading, paragraph, image_paragraph = doc.children
        assert heading.metadata["source_line"] == 1
        assert paragraph.metadata["source_line"] == 3
        assert collect_nodes(doc, Link)[0].metadata["source_line"] == 3
        assert collect_nodes(doc, Image)[0].metadata["source_line"] == 5
        assert image_paragraph.metadata["source_line"] == 5

    def test_text_nodes_not_annotated(self):
        doc = markdown_to_ast("plain")
        SourceLineAnnotator().annotate(doc)
        assert doc.children[0].content[0].metadata == {}

    def test_existing_value_kept(self):
        doc = markdown_to_ast("plain")
        doc.children[0].metadata["source_line"] = 42
        annotator = SourceLineAnnotator()
        annotator.annotate(doc)
        assert doc.children[0].metadata["source_line"] == 42
        assert annotator.annotated == 0

    def test_idempotent(self):
        doc = markdown_to_ast("# A\n\n- one\n- two")
        SourceLineAnnotator().annotate(doc)
        snapshot = [child.metadata.copy() for child in doc.children]
        SourceLineAnnotator().annotate(doc)
        assert [child.metadata for child in doc.children] == snapshot
