"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# AI Diary Review

A diary full of **joy** and *wonder*.

## Highlights

- Sharp observation
* Clear wording
• Honest feelings

1. Add more detail
2. Try a metaphor

> Keep it up!

```python
print("hello")

print("again")
```

---
Score: **excellent**"""

SAMPLE_HTML = (
    "<h2>Photosynthesis</h2>"
    "<p>Plants use <strong>light</strong> &amp; <em>water</em>.</p>"
    "<ul><li>Light</li><li>CO&#8322;</li></ul>"
    "<blockquote>Mostly in chloroplasts.</blockquote>"
    "<hr>"
    "<pre><code>6CO2 + 6H2O</code></pre>"
)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_html")
def sample_html_fixture():
    return SAMPLE_HTML
