"""Pytest fixtures for kssdoc tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from kssdoc.schemas import ParseOptions

HEADER_LESS = """\
/**
 * ONE LINE, NO MODIFIERS
 *
 * @styleguide header.one-line.no-modifiers
 */
.one-line { color: red; }

/**
 * ONE LINE, MULTIPLE MODIFIERS
 *
 * @modifier :hover - HOVER
 * @modifier :disabled - DISABLED
 *
 * @styleguide header.one-line.multiple-modifiers
 */

/**
 * HEADER DETECTION
 *
 * @description SEPARATE PARAGRAPH
 *
 * @modifier :hover - HOVER
 * @modifier :disabled - DISABLED
 *
 * @styleguide header.description
 */

/**
 * TWO LINES, MULTIPLE
 * MODIFIERS LIKE SO
 *
 * @modifier :hover - HOVER
 * @modifier :disabled - DISABLED
 *
 * @styleguide header.two-lines
 */

/**
 * THREE PARAGRAPHS, NO MODIFIERS
 *
 * @description ANOTHER PARAGRAPH
 *
 * AND ANOTHER
 *
 * @styleguide header.three-paragraphs
 */
"""

MODIFIERS_LESS = """\
/**
 * No modifiers
 *
 * @styleguide no-modifiers
 */

/**
 * Variable white space
 *
 * @modifier :hover - HOVER
 * @modifier :disabled    -    DISABLED
 * @modifier :focus - INCLUDING
 *   MULTIPLE LINES
 * @modifier :link\t-\tWITH TABS
 *
 * @styleguide modifiers.variable-white-space
 */

/**
 * Classes and elements
 *
 * @modifier .red - MAKE IT RED
 * @modifier .red-yellow - MAKE IT ORANGE
 * @modifier a span - Two elements
 *
 * @styleguide modifiers.classes-elements
 */

/**
 * More than one dash
 *
 * @modifier .red - Color - red
 * @modifier .yellow - Color  -  yellow
 * @modifier .blue - Color - blue  -  another dash
 *
 * @styleguide modifiers.multiple-dashes
 */
"""

CUSTOM_LESS = """\
/**
 * Inline value
 *
 * @custom The value of this property is inline.
 *
 * @styleguide custom.inline
 */

/**
 * Value on the next line
 *
 * @custom
 * The value of this property is on the next line.
 *
 * @styleguide custom.value.next-line
 */

/**
 * Multi-line value
 *
 * @custom The value of this property spans multiple
 * lines.
 *
 * @styleguide custom.value.multi-line
 */

/**
 * Multi-word property
 *
 * @custom-multi-word-property This is a multi-word property.
 *
 * @styleguide custom.multi-word
 */

/**
 * Multiple properties
 *
 * @custom This is the first property.
 * @custom2 This is the second property.
 *
 * @styleguide custom.multi
 */
"""

BUTTONS_CSS = """\
/**
 * Buttons
 *
 * @description Use buttons for *actions*.
 * @modifier :hover - Highlight
 * @modifier .primary - Main call to action
 * @markup <button class="{{modifier_class}}">Go</button>
 * @weight 2
 * @styleguide forms.button
 */
.button { padding: 4px; }
"""

MIXINS_SCSS = """\
// Mixins
//
// @param @color = #fff - Button color
// @param $size - Size of the button
// @deprecated
// @styleguide tools.mixins
@mixin button($color: #fff, $size: 1em) {}

/* Not documentation */
"""


@pytest.fixture
def header_less() -> str:
    """Stylesheet exercising header and description extraction."""
    return HEADER_LESS


@pytest.fixture
def modifiers_less() -> str:
    """Stylesheet exercising the modifier syntax."""
    return MODIFIERS_LESS


@pytest.fixture
def custom_less() -> str:
    """Stylesheet with custom properties."""
    return CUSTOM_LESS


@pytest.fixture
def buttons_css() -> str:
    """A single fully documented section."""
    return BUTTONS_CSS


@pytest.fixture
def mixins_scss() -> str:
    """Single-line comment documentation with parameters."""
    return MIXINS_SCSS


@pytest.fixture
def plain_options() -> ParseOptions:
    """Options with Markdown rendering turned off."""
    return ParseOptions(markdown=False)


@pytest.fixture
def styles_dir(tmp_path: Path) -> Path:
    """Create a directory tree of documented stylesheets."""
    styles = tmp_path / "styles"
    (styles / "forms").mkdir(parents=True)
    (styles / "tools").mkdir()

    (styles / "forms" / "buttons.css").write_text(BUTTONS_CSS)
    (styles / "tools" / "mixins.scss").write_text(MIXINS_SCSS)
    (styles / "notes.txt").write_text("/**\n * @styleguide ignored.text\n */\n")
    return styles
