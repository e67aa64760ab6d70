# ABOUTME: Wraps a book's comments HTML fragment in a standalone page.
# ABOUTME: The page carries the detail pane stylesheet with dark and light palettes.

from string import Template

_DOCUMENT = Template("""\
<html>
    <head>
        <meta charset="utf-8">
        <style>
            body {
                font-family: "San Francisco", Arial, sans-serif;
                font-size: 16px;
                color: #dfdfdf;
                background-color: #2b2c2a;
                margin: 16px;
                cursor: default;
                -webkit-user-select: none;
                -moz-user-select: none;
                -ms-user-select: none;
                user-select: none;
            }

            strong {
                font-weight: bold;
            }

            @media (prefers-color-scheme: light) {
                body {
                    color: #242424;
                    background-color: #edeeed;
                }
            }
        </style>
    </head>
    <body>
        $body
    </body>
</html>
""")


def comments_document(fragment: str | None) -> str:
    """Embed a comments fragment in a full HTML document.

    Calibre stores comments as HTML already, so the fragment is inserted
    verbatim. None yields a page with an empty body.
    """
    return _DOCUMENT.substitute(body=fragment or "")
