from picup.api.image.scan import scan


def test_with_fragment_keeps_alt_text_that_repeats_the_url():
    ref = next(scan("![a.png](a.png)"))
    assert ref.with_fragment("https://cdn/a.png") == "![a.png](https://cdn/a.png)"


def test_with_fragment_keeps_title_and_attributes():
    ref = next(scan('![alt](a.png "Title")'))
    assert ref.with_fragment("https://cdn/a.png") == '![alt](https://cdn/a.png "Title")'

    ref = next(scan('<img class="wide" src="a.png" alt="a.png">'))
    assert ref.with_fragment("https://cdn/a.png") == '<img class="wide" src="https://cdn/a.png" alt="a.png">'


def test_with_fragment_angle_and_wikilink():
    ref = next(scan("![x](<my pic.png> 'T')"))
    assert ref.with_fragment("https://cdn/p.png") == "![x](<https://cdn/p.png> 'T')"

    ref = next(scan("![[pic.png|200]]"))
    assert ref.with_fragment("https://cdn/pic.png") == "![[https://cdn/pic.png|200]]"
