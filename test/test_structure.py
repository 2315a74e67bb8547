from httpcodes.citation import RFC, Citation
from httpcodes.structure import Category, StatusCode


def test_status_code():
    assert StatusCode(404) == 404
    assert repr(StatusCode(404)) == 'StatusCode(404)'
    assert StatusCode(404).client_error
    assert not StatusCode(404).server_error
    assert StatusCode(101).informational
    assert StatusCode(299).successful
    assert StatusCode(308).redirection
    assert StatusCode(599).server_error
    assert StatusCode(404).category is Category.client_error
    assert StatusCode(600).category is None
    assert StatusCode(99).category is None


def test_category():
    assert [category.tag for category in Category] == [
        'Informational', 'Success', 'Redirection', 'ClientError',
        'ServerError']
    assert Category.client_error.label == 'client error'
    assert Category.informational < Category.server_error
    assert sorted([Category.server_error, Category.success]) == \
        [Category.success, Category.server_error]
    assert Category.for_code(100) is Category.informational
    assert Category.for_code(199) is Category.informational
    assert Category.for_code(451) is Category.client_error
    assert Category.for_code(600) is None
    assert Category.for_code('404') is None
    assert Category.for_code(True) is None
    assert Category.from_tag(Category.success) is Category.success
    assert Category.from_tag('Redirection') is Category.redirection
    assert Category.from_tag('clienterror') is None


def test_citations():
    cite = RFC(7231, section=(6, 5, 4))
    assert cite.num == 7231
    assert cite.section == '6.5.4'
    assert cite.url == 'https://tools.ietf.org/html/rfc7231#section-6.5.4'
    assert cite.title == 'RFC\N{NO-BREAK SPACE}7231 §\N{NO-BREAK SPACE}6.5.4'
    assert cite == RFC(7231, section='6.5.4')
    assert cite != RFC(7231)
    assert RFC(6585, section=4).url.endswith('#section-4')
    assert RFC(2324).url == 'https://tools.ietf.org/html/rfc2324'
    assert str(Citation(None, 'https://example.com/')) == \
        'https://example.com/'
    assert len(set([RFC(7231), RFC(7231), RFC(7230)])) == 2
