import pytest

from httpcodes import registry
from httpcodes.registry import (NotFound, all_entries, list_by_category,
                                lookup_by_code, lookup_by_name)
from httpcodes.structure import Category, StatusCode


def test_lookup_by_code():
    entry = lookup_by_code(404)
    assert entry.name == 'NOT_FOUND'
    assert entry.code == 404
    assert isinstance(entry.code, StatusCode)
    assert entry.category is Category.client_error
    assert entry.title == 'Not Found'
    assert 'could not be found' in entry.description
    assert lookup_by_code(StatusCode(200)).name == 'OK'


def test_lookup_by_name():
    assert lookup_by_name('NOT_FOUND').code == 404
    assert lookup_by_name('UNAUTHORISED').code == 401
    assert lookup_by_name('UNPROCESSABLE_ENTRY').code == 422
    assert lookup_by_name('IM_A_TEAPOT').code == 418
    assert lookup_by_name('HTTP_VERSION_NOT_SUPPORTED').code == 505


def test_not_found():
    with pytest.raises(NotFound) as info:
        lookup_by_code(999)
    assert info.value.key == 999
    assert str(info.value) == 'unknown status code: 999'

    with pytest.raises(NotFound) as info:
        lookup_by_name('NOT_A_STATUS')
    assert str(info.value) == 'unknown status name: NOT_A_STATUS'

    with pytest.raises(NotFound) as info:
        lookup_by_code(StatusCode(299))
    assert str(info.value) == 'unknown status code: 299'

    # Unassigned codes inside a known class are still not found.
    for code in [427, 499, 509, 600, 0, -404]:
        with pytest.raises(NotFound):
            lookup_by_code(code)


def test_no_coercion():
    for key in ['404', 404.0, True, None]:
        with pytest.raises(NotFound):
            lookup_by_code(key)
    for key in ['not_found', 'Not Found', 'NOT_FOUND ', 404]:
        with pytest.raises(NotFound):
            lookup_by_name(key)


def test_not_found_is_key_error():
    with pytest.raises(KeyError):
        lookup_by_code(299)


def test_category_invariant():
    for entry in all_entries():
        assert 100 <= entry.code <= 599
        assert entry.category.value == entry.code // 100
        assert entry.category is entry.code.category


def test_uniqueness():
    entries = all_entries()
    assert len(set(entry.code for entry in entries)) == len(entries)
    assert len(set(entry.name for entry in entries)) == len(entries)


def test_all_entries():
    entries = all_entries()
    assert len(entries) == 63
    codes = [entry.code for entry in entries]
    assert codes == sorted(codes)
    assert all(a < b for (a, b) in zip(codes, codes[1:]))
    assert codes[0] == 100
    assert codes[-1] == 511


def test_list_by_category():
    client_errors = list_by_category(Category.client_error)
    assert client_errors[0].code == 400
    assert client_errors[-1].code == 451
    assert all(400 <= entry.code <= 499 for entry in client_errors)
    codes = [entry.code for entry in client_errors]
    assert codes == sorted(codes)
    assert list_by_category('ClientError') == client_errors
    assert list_by_category('client_error') == client_errors

    assert [entry.code for entry in list_by_category('Informational')] == \
        [100, 101, 102, 103]
    assert len(list_by_category(Category.success)) == 10
    assert len(list_by_category(Category.redirection)) == 9
    assert len(client_errors) == 29
    assert len(list_by_category(Category.server_error)) == 11


def test_list_by_category_covers_everything():
    listed = [entry for category in Category
              for entry in list_by_category(category)]
    assert tuple(listed) == all_entries()


def test_list_by_unknown_category():
    with pytest.raises(NotFound):
        list_by_category('Misc')


def test_sequences_are_reusable():
    entries = list_by_category(Category.redirection)
    assert list(entries) == list(entries)
    assert isinstance(all_entries(), tuple)


def test_idempotence():
    assert lookup_by_code(503) == lookup_by_code(503)
    assert lookup_by_name('GONE') == lookup_by_name('GONE')
    assert list_by_category('Success') == list_by_category('Success')
    assert all_entries() == all_entries()


def test_entries_are_immutable():
    entry = lookup_by_code(200)
    with pytest.raises(AttributeError):
        entry.code = 201
    with pytest.raises(TypeError):
        registry._by_code[200] = entry


def test_get():
    assert registry.get(204).name == 'NO_CONTENT'
    assert registry.get('NO_CONTENT').code == 204
    assert registry.get(299) is None
    assert registry.get('NOPE', 'fallback') == 'fallback'


def test_category_of():
    assert registry.category_of(404) is Category.client_error
    assert registry.category_of(499) is Category.client_error
    assert registry.category_of(599) is Category.server_error
    with pytest.raises(NotFound):
        registry.category_of(600)
    with pytest.raises(NotFound):
        registry.category_of(99)


def test_describe_category():
    assert 'caused by the client' in \
        registry.describe_category(Category.client_error)
    assert 'server failed' in registry.describe_category('ServerError')
    with pytest.raises(NotFound):
        registry.describe_category('Misc')


def test_reason():
    assert registry.reason(404) == 'Not Found'
    assert registry.reason(418) == "I'm a teapot"
    assert registry.reason('UNAUTHORISED') == 'Unauthorized'
    assert registry.reason(299) is None


def test_is_cacheable():
    assert registry.is_cacheable(200)
    assert registry.is_cacheable(404)
    assert registry.is_cacheable(308)
    assert not registry.is_cacheable(201)
    assert not registry.is_cacheable(100)
    assert not registry.is_cacheable(299)


def test_payment_required_is_plain():
    entry = lookup_by_name('PAYMENT_REQUIRED')
    assert entry.code == 402
    assert entry.category is Category.client_error
    assert 'Reserved' in entry.description


def test_citations():
    assert lookup_by_code(404).citations[0].url == \
        'https://tools.ietf.org/html/rfc7231#section-6.5.4'
    assert len(lookup_by_code(418).citations) == 2
    for entry in all_entries():
        assert entry.citations
