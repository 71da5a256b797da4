"""Shared fixtures for core unit tests"""

import pytest

from mdsite.core.render.renderer import render_markdown


SAMPLE_MD = """\
# Chapter One

A paragraph with **bold** text and `a < b`.

## Heading 2

- item one
- item two

```python
print("<hello>")
```

> quoted

---

###### Aside
"""


@pytest.fixture(name="render")
def render_fixture():
    """Render markdown text with the default profile and return the body HTML."""
    return lambda text: render_markdown(text).body


@pytest.fixture(name="sample_body")
def sample_body_fixture(render):
    return render(SAMPLE_MD)
