"""Tests for the search request builder and its client dispatch."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.aggregations import AvgAggregation, TermsAggregation
from ElasticDSL.clients import clear_client, current_client, register_client
from ElasticDSL.core.errors import ArgumentTypeError, ConfigurationError
from ElasticDSL.facet import TermsFacet
from ElasticDSL.filter import TermFilter
from ElasticDSL.query import MatchAllQuery, TermQuery
from ElasticDSL.search import Highlight, Request, ScriptField, Sort, TermSuggester


class _StubClient:
    def __init__(self, response: object = None) -> None:
        self.response = response if response is not None else {"hits": {"total": 0, "hits": []}}
        self.calls: list[tuple[str, object]] = []

    def post(self, path, body=None, on_success=None, on_error=None):
        self.calls.append((path, body))
        if on_success is not None:
            return on_success(self.response)
        return self.response


class TestRequestTargets(unittest.TestCase):
    def test_types_without_indices_target_all(self) -> None:
        request = Request(types="tweet")

        self.assertEqual(request.indices(), ["_all"])
        self.assertEqual(request.path(), "/_all/tweet/_search")

    def test_clearing_indices_keeps_types_addressable(self) -> None:
        request = Request("twitter", "tweet").indices([])

        self.assertEqual(request.indices(), ["_all"])

    def test_indices_and_types_are_deduplicated(self) -> None:
        request = Request(["a", "b", "a"], ["t", "t"])

        self.assertEqual(request.path(), "/a,b/t/_search")

    def test_path_without_targets(self) -> None:
        self.assertEqual(Request().path(), "/_search")

    def test_routing_and_url_parameters(self) -> None:
        request = Request("twitter", "tweet", "r1").search_type("DFS_QUERY_THEN_FETCH").preference("_local")

        self.assertEqual(
            request.path(),
            "/twitter/tweet/_search?routing=r1&search_type=dfs_query_then_fetch&preference=_local",
        )
        self.assertEqual(request.routing(), "r1")

    def test_routing_requires_string(self) -> None:
        with self.assertRaises(ArgumentTypeError):
            Request().routing(5)


class TestRequestBody(unittest.TestCase):
    def test_query_and_filter_slots_are_typed(self) -> None:
        request = Request().query(MatchAllQuery()).filter(TermFilter("a", 1))

        self.assertEqual(request.get(), {"query": {"match_all": {}}, "filter": {"term": {"a": 1}}})
        with self.assertRaises(ArgumentTypeError):
            request.query(TermFilter("a", 1))
        with self.assertRaises(ArgumentTypeError):
            request.filter(MatchAllQuery())

    def test_sort_overloads(self) -> None:
        request = Request().sort("user").sort(Sort("age").desc()).sort("post_date", "ASC")

        self.assertEqual(request.sort(), ["user", {"age": {"order": "desc"}}, {"post_date": {"order": "asc"}}])

        request.sort("x", "sideways")
        self.assertEqual(len(request.sort()), 3)

        request.sort(["_score", Sort("name")])
        self.assertEqual(request.sort(), ["_score", {"name": {}}])

    def test_sort_rejects_other_nodes(self) -> None:
        request = Request().sort("user")

        with self.assertRaises(ArgumentTypeError):
            request.sort(MatchAllQuery())
        with self.assertRaises(ArgumentTypeError):
            request.sort(["a", 3])
        self.assertEqual(request.sort(), ["user"])

    def test_source_forms(self) -> None:
        request = Request()

        self.assertEqual(request.source(False).source(), False)
        self.assertEqual(request.source("obj.*").source(), {"includes": "obj.*"})
        self.assertEqual(
            request.source(["a", "b"], "c").source(),
            {"includes": ["a", "b"], "excludes": "c"},
        )

    def test_source_errors(self) -> None:
        with self.assertRaisesRegex(ArgumentTypeError, "excludes requires includes"):
            Request().source(None, "c")
        with self.assertRaises(ArgumentTypeError):
            Request().source(12)

    def test_named_sections_merge(self) -> None:
        request = (
            Request()
            .facet(TermsFacet("tags").field("tag"))
            .agg(TermsAggregation("users").field("user"))
            .aggregation(AvgAggregation("age").field("age"))
            .script_field(ScriptField("double").script("doc['n'].value * 2"))
            .suggest("global text")
            .suggest(TermSuggester("fix").field("body"))
        )

        body = request.get()
        self.assertEqual(list(body["facets"]), ["tags"])
        self.assertEqual(list(body["aggs"]), ["users", "age"])
        self.assertEqual(body["script_fields"], {"double": {"script": "doc['n'].value * 2"}})
        self.assertEqual(body["suggest"], {"text": "global text", "fix": {"term": {"field": "body"}}})

    def test_merge_rejects_wrong_category(self) -> None:
        with self.assertRaisesRegex(ArgumentTypeError, "an Aggregation"):
            Request().aggregation(TermsFacet("tags"))
        with self.assertRaises(ArgumentTypeError):
            Request().suggest(MatchAllQuery())

    def test_scalar_options(self) -> None:
        request = (
            Request()
            .size(20)
            .from_(40)
            .timeout("5s")
            .track_scores(True)
            .explain(False)
            .version(True)
            .min_score(0.5)
            .fields("title")
            .index_boost("index1", 1.4)
            .highlight(Highlight("title"))
        )

        self.assertEqual(
            request.get(),
            {
                "size": 20,
                "from": 40,
                "timeout": "5s",
                "track_scores": True,
                "explain": False,
                "version": True,
                "min_score": 0.5,
                "fields": ["title"],
                "indices_boost": {"index1": 1.4},
                "highlight": {"fields": {"title": {}}},
            },
        )

    def test_index_boost_without_boost_reads(self) -> None:
        request = Request().index_boost("index1", 1.4)

        self.assertEqual(request.index_boost("index1"), 1.4)
        self.assertIsNone(request.index_boost("index2"))
        self.assertEqual(request.get(), {"indices_boost": {"index1": 1.4}})
        self.assertIsNone(Request().index_boost("index1"))
        self.assertNotIn("indices_boost", Request().get())

    def test_body_is_snapshot_of_children(self) -> None:
        query = TermQuery("a", 1)
        request = Request().query(query)

        query.boost(3.0)

        self.assertEqual(request.query(), {"term": {"a": {"value": 1}}})


class TestDoSearch(unittest.TestCase):
    def setUp(self) -> None:
        clear_client()

    def tearDown(self) -> None:
        clear_client()

    def test_posts_body_through_explicit_client(self) -> None:
        client = _StubClient()
        request = Request("twitter", "tweet", "r1").query(TermQuery("user", "kimchy"))

        received = []
        result = request.do_search(received.append, client=client)

        self.assertIsNone(result)
        self.assertEqual(received, [client.response])
        path, body = client.calls[0]
        self.assertEqual(path, "/twitter/tweet/_search?routing=r1")
        self.assertEqual(json.loads(body), {"query": {"term": {"user": {"value": "kimchy"}}}})

    def test_uses_registered_client(self) -> None:
        client = register_client(_StubClient({"hits": {"total": 1}}))

        result = Request("twitter").do_search()

        self.assertIs(current_client(), client)
        self.assertEqual(result, {"hits": {"total": 1}})
        self.assertEqual(client.calls[0][0], "/twitter/_search")

    def test_without_client_raises_configuration_error(self) -> None:
        with self.assertRaises(ConfigurationError):
            Request("twitter").do_search()

    def test_clear_client_returns_previous(self) -> None:
        client = register_client(_StubClient())

        self.assertIs(clear_client(), client)
        self.assertIsNone(current_client())


if __name__ == "__main__":
    unittest.main()
