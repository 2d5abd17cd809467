"""Tests for splitting comment text into tags."""

from kssdoc.annotations import parse_annotations


class TestParseAnnotations:
    """Tests for parse_annotations."""

    def test_lead_text_and_tags(self) -> None:
        """Test separating lead text from tags."""
        annotation = parse_annotations("Buttons\nand links\n\n@weight 3\n@styleguide forms.button")

        assert annotation.text == "Buttons\nand links"
        assert annotation.tags == {"weight": ["3"], "styleguide": ["forms.button"]}

    def test_no_tags(self) -> None:
        """Test text without any tags."""
        annotation = parse_annotations("Just a comment")

        assert annotation.text == "Just a comment"
        assert annotation.tags == {}

    def test_repeated_tags_keep_order(self) -> None:
        """Test that repeated tags collect every value in order."""
        annotation = parse_annotations("@modifier .a - A\n@modifier .b - B\n@modifier .c - C")

        assert annotation.all("modifier") == [".a - A", ".b - B", ".c - C"]
        assert annotation.first("modifier") == ".a - A"

    def test_multi_line_value(self) -> None:
        """Test that a value continues until the next tag."""
        annotation = parse_annotations(
            "@description First paragraph\n\nSecond paragraph\n\n@markup <div></div>"
        )

        assert annotation.first("description") == "First paragraph\n\nSecond paragraph"
        assert annotation.first("markup") == "<div></div>"

    def test_value_on_next_line(self) -> None:
        """Test a tag whose value starts on the following line."""
        annotation = parse_annotations("@custom\nThe value.")

        assert annotation.first("custom") == "The value."

    def test_bare_tag_is_present(self) -> None:
        """Test that a tag without a value still counts."""
        annotation = parse_annotations("@deprecated\n@styleguide old")

        assert annotation.has("deprecated")
        assert annotation.all("deprecated") == [""]
        assert not annotation.has("experimental")

    def test_hyphenated_tag_names(self) -> None:
        """Test tag names containing hyphens."""
        annotation = parse_annotations("@custom-multi-word-property Value")

        assert annotation.first("custom-multi-word-property") == "Value"

    def test_missing_tag_defaults(self) -> None:
        """Test defaults for absent tags."""
        annotation = parse_annotations("Text")

        assert annotation.first("markup") == ""
        assert annotation.first("markup", "none") == "none"
        assert annotation.all("modifier") == []

    def test_tag_inside_line_is_text(self) -> None:
        """Test that @name in the middle of a line does not start a tag."""
        annotation = parse_annotations("@description Use @include button\n@styleguide x")

        assert annotation.first("description") == "Use @include button"
        assert annotation.first("styleguide") == "x"
