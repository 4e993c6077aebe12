import pytest

from picup.api.image.is_remote import is_remote


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("http://example.com/a.png", True),
        ("https://example.com/a.png", True),
        ("HTTPS://EXAMPLE.COM/A.PNG", True),
        ("data:image/png;base64,AAAA", True),
        ("  https://example.com/a.png", True),
        ("images/a.png", False),
        ("/abs/a.png", False),
        ("httpdocs/a.png", False),
        ("ftp://example.com/a.png", False),
    ],
)
def test_is_remote(fragment, expected):
    assert is_remote(fragment) is expected
