"""Fixed HTML document shell wrapped around rendered chapter content"""

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <title>{title}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="stylesheet" type="text/css" href="{stylesheet}" />
</head>
<body>
<!-- GENERATED CONTENT -->
{body}
</body>
</html>"""


def build_page(title: str, body: str, stylesheet: str = 'style.css') -> str:
    """Return a complete HTML page; title and body are inserted as-is."""
    return PAGE_TEMPLATE.format(title=title, body=body, stylesheet=stylesheet)
