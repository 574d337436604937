import pytest

from woodcore.http import RequestDescriptor


def test_get_with_query_gets_default_pagination():
    d = RequestDescriptor("/clients", "get", query={})
    out = d.with_defaults()
    assert out.query == {"perPage": 10, "page": 1}
    assert d.query == {}  # input descriptor untouched


def test_caller_pagination_values_are_kept():
    d = RequestDescriptor("/clients", "GET", query={"perPage": 50, "page": 3})
    assert d.with_defaults().query == {"perPage": 50, "page": 3}


def test_zero_values_are_replaced_like_missing_ones():
    d = RequestDescriptor("/clients", "GET", query={"perPage": 0, "page": 0})
    assert d.with_defaults().query == {"perPage": 10, "page": 1}


def test_post_never_gets_pagination():
    d = RequestDescriptor("/loans/1", "POST", query={"command": "undoapproval"}, body={})
    assert d.with_defaults() is d
    assert d.query == {"command": "undoapproval"}


def test_get_without_query_is_left_alone():
    d = RequestDescriptor("/clients/1")
    assert d.with_defaults() is d
    assert d.query is None


def test_method_is_normalized_and_validated():
    assert RequestDescriptor("/x", "post").method == "POST"
    with pytest.raises(ValueError):
        RequestDescriptor("/x", "DELETE")


def test_unresolved_placeholder_is_rejected():
    with pytest.raises(ValueError):
        RequestDescriptor("/loans/{loanAccountId}")


def test_with_page_returns_new_descriptor():
    d = RequestDescriptor("/clients", query={"perPage": 5, "page": 1})
    d2 = d.with_page(4)
    assert d2.query == {"perPage": 5, "page": 4}
    assert d.query["page"] == 1


def test_caller_dict_is_copied():
    query = {"page": 2}
    d = RequestDescriptor("/clients", query=query)
    query["page"] = 9
    assert d.query == {"page": 2}
