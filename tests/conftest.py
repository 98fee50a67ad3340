"""Shared fixtures for the minification tests."""

import pytest

from minify_html_literals.core.config import Settings
from minify_html_literals.core.factory import ComponentFactory

SOURCE = """
    function render(title, items) {
      return html`
        <h1 class="heading">${title}</h1>
        <ul>
          ${items.map(item => {
            return getHTML()`
              <li>${item}</li>
            `;
          })}
        </ul>
      `;
    }

    function noMinify() {
      return `
        <div>Not tagged html</div>
      `;
    }

    function taggednoMinify() {
      return css`
        <style>
          .heading {
            font-size: 24px;
          }
        </style>
      `;
    }
  """

SOURCE_MIN = """
    function render(title, items) {
      return html`<h1 class=heading>${title}</h1><ul>${items.map(item => {
            return getHTML()`<li>${item}</li>`;
          })}</ul>`;
    }

    function noMinify() {
      return `
        <div>Not tagged html</div>
      `;
    }

    function taggednoMinify() {
      return css`
        <style>
          .heading {
            font-size: 24px;
          }
        </style>
      `;
    }
  """


@pytest.fixture
def source():
    """Source with two html templates, one untagged and one css template."""
    return SOURCE


@pytest.fixture
def source_min():
    """The expected result of minifying ``source``."""
    return SOURCE_MIN


@pytest.fixture
def factory():
    """A factory with default settings, independent of the environment."""
    return ComponentFactory(Settings(_env_file=None))
