from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlsplit

from pyrtti.config import RttiConfig
from pyrtti.relays import BUILTIN_STRATEGIES, RelayStrategy, build_strategies, build_target_url, encode_target


def test_builtin_order_without_custom_relay() -> None:
    strategies = build_strategies(RttiConfig(api_key="KEY"))

    assert [s.name for s in strategies] == ["AllOrigins (JSON)", "AllOrigins (Raw)", "corsproxy.io"]
    assert [s.enveloping for s in strategies] == [True, False, False]


def test_custom_relay_is_first_and_raw() -> None:
    strategies = build_strategies(RttiConfig(api_key="KEY", custom_relay="  https://relay.example/?u=  "))

    assert strategies[0] == RelayStrategy(name="CustomProxy", template="https://relay.example/?u=")
    assert strategies[1:] == list(BUILTIN_STRATEGIES)


def test_blank_custom_relay_is_ignored() -> None:
    assert len(build_strategies(RttiConfig(custom_relay="   "))) == len(BUILTIN_STRATEGIES)


def test_build_url_appends_encoded_target() -> None:
    strategy = RelayStrategy(name="x", template="https://relay.example/?u=")
    assert strategy.build_url("https://a.example/b?c=1&d=2") == (
        "https://relay.example/?u=https%3A%2F%2Fa.example%2Fb%3Fc%3D1%26d%3D2"
    )


def test_build_url_fills_placeholder() -> None:
    strategy = RelayStrategy(name="x", template="https://relay.example/get?url={url}&raw=1")
    assert strategy.build_url("https://a.example/") == "https://relay.example/get?url=https%3A%2F%2Fa.example%2F&raw=1"


def test_encode_target_matches_encode_uri_component() -> None:
    assert encode_target("a b/c?d=e&f=(g)*'!~") == "a%20b%2Fc%3Fd%3De%26f%3D(g)*'!~"


def test_builtin_relays_round_trip_target() -> None:
    target = "https://api.translink.ca/rttiapi/v1/buses?apikey=KEY&_=1"
    for strategy in BUILTIN_STRATEGIES:
        query = parse_qs(urlsplit(strategy.build_url(target)).query)
        assert query["url"] == [target]


def test_target_url_with_route() -> None:
    url = build_target_url(RttiConfig(), "KEY", "099", 1234)
    assert url == "https://api.translink.ca/rttiapi/v1/buses?apikey=KEY&routeNo=099&_=1234"


def test_target_url_without_route_and_custom_base() -> None:
    url = build_target_url(RttiConfig(base_url="http://localhost:8080/rtti/"), "K&Y", None, 5)
    assert url == "http://localhost:8080/rtti/buses?apikey=K%26Y&_=5"
    assert unquote(url).count("routeNo") == 0
