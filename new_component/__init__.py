"""new-component -- scaffolds React component directories from bundled templates.

Quick usage::

    new-component Avatar
    new-component Avatar --dir src/widgets --lang fr-fr
    python -m new_component Avatar
"""

__version__ = "1.0.0"
