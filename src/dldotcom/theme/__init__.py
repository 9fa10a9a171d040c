"""The site's MkDocs theme, registered under the ``mkdocs.themes`` entry point.
"""
