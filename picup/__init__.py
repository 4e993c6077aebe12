"""picup - upload local Markdown images and rewrite their references."""
