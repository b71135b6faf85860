#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/renderers/plain.py
"""Plain-hash rendering from Document.

This module provides the PlainRenderer class which writes a document tree
in the canonical ``type``/``attrs``/``marks``/``content``/``text`` shape,
encoded as JSON or YAML. This is useful for:
- Storing editor documents
- Exchanging trees with browser-side editors
- Writing test fixtures

The renderer uses the ast.serialization module for conversion.
"""

from __future__ import annotations

from prosetree.ast import Document
from prosetree.ast.serialization import to_json, to_yaml
from prosetree.options.plain import PlainRendererOptions
from prosetree.renderers.base import BaseRenderer


class PlainRenderer(BaseRenderer):
    """Render Document nodes to plain-hash JSON or YAML.

    Parameters
    ----------
    options : PlainRendererOptions or None, default = None
        Plain rendering options

    Examples
    --------
    Basic usage:
        >>> from prosetree.ast import Document
        >>> doc = Document()
        >>> _ = doc.add_paragraph("Hello")
        >>> renderer = PlainRenderer(PlainRendererOptions(indent=None))
        >>> renderer.render_to_string(doc)
        '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]}'

    YAML output:
        >>> yaml_text = PlainRenderer(PlainRendererOptions(format="yaml")).render_to_string(doc)

    """

    def __init__(self, options: PlainRendererOptions | None = None):
        """Initialize the plain renderer with options."""
        BaseRenderer._validate_options_type(options, PlainRendererOptions, "plain")
        options = options or PlainRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainRendererOptions = options

    def render_to_string(self, document: Document) -> str:
        """Render a Document to JSON or YAML text.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Encoded plain hash

        Raises
        ------
        DependencyError
            If YAML output is requested without PyYAML installed

        """
        if self.options.format == "yaml":
            return to_yaml(document, sort_keys=self.options.sort_keys)
        return to_json(
            document,
            indent=self.options.indent,
            ensure_ascii=self.options.ensure_ascii,
            sort_keys=self.options.sort_keys,
        )
