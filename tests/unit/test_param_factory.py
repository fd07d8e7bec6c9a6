import pytest
from pydantic import TypeAdapter, ValidationError

from kaltura_params.types import AnyParam, ScalarParam, ParamPlacement, StructuredParam
from kaltura_params.params import (
    ParamFactory,
    user_id,
    currency,
    language,
    session_token,
    response_profile,
    request_correlation_id,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "factory, value, key, in_body",
    [
        (ParamFactory.session_token, "abc123", "ks", True),
        (ParamFactory.language, "en", "language", True),
        (ParamFactory.request_correlation_id, "req-42", "x-kaltura-session-id", False),
        (ParamFactory.currency, "USD", "currency", True),
        (ParamFactory.user_id, "u-9", "userId", True),
    ],
)
def test_scalar_params(factory, value, key, in_body):
    """Test scalar constructors set the fixed key and placement"""
    param = factory(value)

    assert isinstance(param, ScalarParam)
    assert param.key == key
    assert param.value == value
    assert param.in_body is in_body
    assert param.kind == "scalar"


def test_module_level_constructors():
    """Test module functions match the factory methods"""
    assert session_token("abc123") == ParamFactory.session_token("abc123")
    assert language("en").key == "language"
    assert request_correlation_id("req-42").in_body is False
    assert currency("USD").value == "USD"
    assert user_id("u-9").key == "userId"
    assert response_profile({}).key == "responseProfile"


def test_placement():
    """Test placement follows in_body"""
    assert session_token("abc123").placement == ParamPlacement.BODY
    assert request_correlation_id("req-42").placement == ParamPlacement.HEADER


def test_response_profile_keeps_structure():
    """Test response profile stores the structured value as given"""
    profile = {"type": "include", "fields": ["id", "name"]}

    param = response_profile(profile)

    assert isinstance(param, StructuredParam)
    assert param.key == "responseProfile"
    assert param.in_body is True
    assert param.kind == "structured"
    assert param.value == {"type": "include", "fields": ["id", "name"]}
    assert param.value is profile


def test_response_profile_accepts_arbitrary_objects():
    """Test response profile accepts any object"""

    class Custom:
        pass

    value = Custom()
    assert response_profile(value).value is value
    assert response_profile(["a", 1, None]).value == ["a", 1, None]


def test_empty_string_is_accepted():
    """Test constructors do not validate values"""
    param = session_token("")

    assert param.value == ""
    assert param.key == "ks"


def test_same_input_gives_equal_but_distinct_params():
    """Test equal inputs produce equal, separate instances"""
    first = language("en")
    second = language("en")

    assert first == second
    assert first is not second


def test_repeated_constructor_gives_independent_params():
    """Test calling a constructor twice yields two params with the same key"""
    first = currency("USD")
    second = currency("EUR")

    assert first.key == second.key
    assert first.value == "USD"
    assert second.value == "EUR"


def test_params_are_immutable():
    """Test params reject assignment"""
    param = user_id("u-9")

    with pytest.raises(ValidationError):
        param.value = "other"
    with pytest.raises(ValidationError):
        param.in_body = False

    assert param.value == "u-9"


def test_any_param_round_trip_scalar():
    """Test the param union restores a scalar param from its dump"""
    adapter = TypeAdapter(AnyParam)
    param = request_correlation_id("req-42")

    restored = adapter.validate_python(param.model_dump())

    assert isinstance(restored, ScalarParam)
    assert restored == param


def test_any_param_round_trip_structured():
    """Test the param union restores a structured param with its value unchanged"""
    adapter = TypeAdapter(AnyParam)
    value = {"type": "include", "fields": ["id", "name"]}

    restored = adapter.validate_python(
        {"kind": "structured", "key": "responseProfile", "value": value, "in_body": True}
    )

    assert isinstance(restored, StructuredParam)
    assert restored == response_profile(value)
    assert restored.value == {"type": "include", "fields": ["id", "name"]}


def test_any_param_rejects_unknown_kind():
    """Test the param union requires a known kind"""
    with pytest.raises(ValidationError):
        TypeAdapter(AnyParam).validate_python({"kind": "other", "key": "ks", "value": "abc", "in_body": True})
