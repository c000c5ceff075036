"""Tests for filter nodes."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.core.errors import ArgumentTypeError
from ElasticDSL.filter import (
    AndFilter,
    BoolFilter,
    ExistsFilter,
    GeoBboxFilter,
    GeoDistanceFilter,
    IdsFilter,
    MatchAllFilter,
    MissingFilter,
    NotFilter,
    OrFilter,
    PrefixFilter,
    QueryFilter,
    RangeFilter,
    TermFilter,
    TermsFilter,
    TypeFilter,
)
from ElasticDSL.query import MatchAllQuery, TermQuery
from ElasticDSL.search import GeoPoint


class TestLeafFilters(unittest.TestCase):
    def test_term_filter_value_sits_directly_under_field(self) -> None:
        self.assertEqual(TermFilter("user", "kimchy").get(), {"term": {"user": "kimchy"}})
        self.assertEqual(TermFilter("user", "kimchy")._type(), "filter")

    def test_name_and_cache_options(self) -> None:
        node = TermFilter("user", "kimchy").name("by_user").cache(True).cache_key("k1")

        self.assertEqual(
            node.get(),
            {"term": {"user": "kimchy", "_name": "by_user", "_cache": True, "_cache_key": "k1"}},
        )
        self.assertEqual(node.name(), "by_user")

    def test_field_rename_keeps_value(self) -> None:
        node = PrefixFilter("user", "ki").field("author")

        self.assertEqual(node.get(), {"prefix": {"author": "ki"}})
        self.assertEqual(node.prefix(), "ki")

    def test_range_filter_literal(self) -> None:
        node = RangeFilter("age").from_(10).to(20).include_lower(True).include_upper(False)

        self.assertEqual(
            node.get(),
            {"range": {"age": {"from": 10, "to": 20, "include_lower": True, "include_upper": False}}},
        )

    def test_terms_filter_append_replace_and_execution(self) -> None:
        node = TermsFilter("tags", ["a"]).terms("b").execution("BOOL")
        self.assertEqual(node.get(), {"terms": {"tags": ["a", "b"], "execution": "bool"}})

        node.terms(["z"]).execution("unknown")
        self.assertEqual(node.get(), {"terms": {"tags": ["z"], "execution": "bool"}})

    def test_exists_and_missing(self) -> None:
        self.assertEqual(ExistsFilter("user").get(), {"exists": {"field": "user"}})
        node = MissingFilter("user").existence(True).null_value(False)
        self.assertEqual(node.get(), {"missing": {"field": "user", "existence": True, "null_value": False}})

    def test_ids_filter_types(self) -> None:
        node = IdsFilter("1").type("tweet").type("user")
        self.assertEqual(node.get(), {"ids": {"values": ["1"], "type": ["tweet", "user"]}})

        node.type(["blog"])
        self.assertEqual(node.type(), ["blog"])

    def test_type_filter(self) -> None:
        self.assertEqual(TypeFilter("tweet").get(), {"type": {"value": "tweet"}})

    def test_query_filter_requires_query(self) -> None:
        node = QueryFilter(TermQuery("a", 1))

        self.assertEqual(node.get(), {"fquery": {"query": {"term": {"a": {"value": 1}}}}})
        with self.assertRaises(ArgumentTypeError):
            QueryFilter(TermFilter("a", 1))


class TestCompoundFilters(unittest.TestCase):
    def test_bool_filter_accepts_only_filters(self) -> None:
        node = BoolFilter().must(TermFilter("a", 1)).should([MatchAllFilter(), ExistsFilter("b")])

        self.assertEqual(len(node.must()), 1)
        self.assertEqual(node.should(), [{"match_all": {}}, {"exists": {"field": "b"}}])
        with self.assertRaisesRegex(ArgumentTypeError, "a Filter"):
            node.must_not(MatchAllQuery())

    def test_and_or_filter_shapes(self) -> None:
        and_node = AndFilter([TermFilter("a", 1), TermFilter("b", 2)])
        or_node = OrFilter(TermFilter("a", 1)).add(TermFilter("b", 2))

        self.assertEqual(
            and_node.get(),
            {"and": {"filters": [{"term": {"a": 1}}, {"term": {"b": 2}}]}},
        )
        self.assertEqual(or_node.filters(), [{"term": {"a": 1}}, {"term": {"b": 2}}])

    def test_and_filter_rejects_queries(self) -> None:
        with self.assertRaises(ArgumentTypeError):
            AndFilter([TermFilter("a", 1), TermQuery("b", 2)])
        node = OrFilter(TermFilter("a", 1))
        with self.assertRaises(ArgumentTypeError):
            node.filters([TermQuery("b", 2)])
        self.assertEqual(node.filters(), [{"term": {"a": 1}}])

    def test_not_filter(self) -> None:
        node = NotFilter(TermFilter("a", 1)).cache(False)

        self.assertEqual(node.get(), {"not": {"filter": {"term": {"a": 1}}, "_cache": False}})


class TestGeoFilters(unittest.TestCase):
    def test_geo_distance_with_lat_lon(self) -> None:
        node = GeoDistanceFilter("pin.location").distance("12km").point(40, -70)

        self.assertEqual(
            node.get(),
            {"geo_distance": {"pin.location": {"lat": 40, "lon": -70}, "distance": "12km"}},
        )

    def test_geo_distance_without_point(self) -> None:
        node = GeoDistanceFilter("loc").distance("5km")

        self.assertIsNone(node.point())
        self.assertEqual(node.get(), {"geo_distance": {"distance": "5km"}})

        node.field("pin").point(40, -70)
        self.assertEqual(node.get(), {"geo_distance": {"distance": "5km", "pin": {"lat": 40, "lon": -70}}})

    def test_geo_distance_with_geo_point(self) -> None:
        node = GeoDistanceFilter("loc").point(GeoPoint([40, -70]))

        self.assertEqual(node.point(), [-70, 40])

    def test_geo_distance_unknown_enum_values_are_ignored(self) -> None:
        node = GeoDistanceFilter("loc").unit("KM").distance_type("plane")

        node.unit("furlongs").distance_type("bogus").optimize_bbox("nowhere")

        self.assertEqual(node.unit(), "km")
        self.assertEqual(node.distance_type(), "plane")
        self.assertIsNone(node.optimize_bbox())

    def test_geo_distance_point_requires_longitude(self) -> None:
        with self.assertRaises(ArgumentTypeError):
            GeoDistanceFilter("loc").point(40)

    def test_bbox_corners_are_lon_lat_pairs(self) -> None:
        node = GeoBboxFilter("loc").top_left(40.73, -74.1).bottom_right(40.01, -71.12).type("Indexed")

        self.assertEqual(
            node.get(),
            {
                "geo_bounding_box": {
                    "loc": {"top_left": [-74.1, 40.73], "bottom_right": [-71.12, 40.01]},
                    "type": "indexed",
                }
            },
        )


if __name__ == "__main__":
    unittest.main()
