"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Unit tests for WireMultiMap.
"""

import threading

import pytest

from logicboxes.codec.multimap import WireMultiMap


class TestWireMultiMap:
    def test_repeated_keys(self):
        params = WireMultiMap([("status", "Active"), ("status", "Suspended"), ("city", "Lahore")])
        assert params.getall("status") == ["Active", "Suspended"]
        assert params.get("city") == "Lahore"
        assert params.keys() == ["status", "city"]
        assert len(params) == 2

    def test_missing_key(self):
        params = WireMultiMap()
        assert params.get("nope") is None
        assert params.get("nope", "x") == "x"
        assert params.getall("nope") == []
        assert "nope" not in params

    def test_items_flatten(self):
        params = WireMultiMap([("a", "1"), ("b", "2"), ("a", "3")])
        assert params.items() == [("a", "1"), ("a", "3"), ("b", "2")]

    def test_urlencode_repeats_keys(self):
        params = WireMultiMap([("order-by", "endtime desc"), ("order-by", "orderid")])
        assert params.urlencode() == "order-by=endtime+desc&order-by=orderid"

    def test_freeze(self):
        params = WireMultiMap([("a", "1")]).freeze()
        assert params.frozen is True
        with pytest.raises(TypeError, match="frozen"):
            params.add("b", "2")

    def test_copy_is_mutable_and_independent(self):
        frozen = WireMultiMap([("a", "1")]).freeze()
        copy = frozen.copy()
        copy.add("a", "2")
        assert copy.getall("a") == ["1", "2"]
        assert frozen.getall("a") == ["1"]

    def test_equality(self):
        assert WireMultiMap([("a", "1")]) == WireMultiMap([("a", "1")])
        assert WireMultiMap([("a", "1")]) != WireMultiMap([("a", "2")])

    def test_concurrent_adds_are_not_lost(self):
        params = WireMultiMap()

        def worker(n: int) -> None:
            for i in range(200):
                params.add("k", f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(params.getall("k")) == 1600
