"""Snippet file builders shared by the test suites."""

TWO_BLOCK_BODY = """Debounces a function.

Waits for the given time before calling the function again.

```js
const debounce = (fn, ms = 0) => fn;
```

```js
debounce(() => console.log('hi'));
```
"""


def snippet_content(title: str = "X", tags: str = "foo,bar", body: str = TWO_BLOCK_BODY) -> str:
    """Compose a snippet file with a frontmatter header."""
    return f"---\ntitle: {title}\ntags: {tags}\n---\n\n{body}"
