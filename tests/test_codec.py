"""Tests for odata_erd.codec — JSON topology decoding and result encoding."""

import json

import pytest

from odata_erd import layout_json
from odata_erd.codec import result_to_dict, result_to_json, topology_from_dict, topology_from_json
from odata_erd.errors import DuplicateIdentifierError, TopologyFormatError
from odata_erd.layout import compute_layout

TOPOLOGY = {
    "nodes": [
        {"id": "Orders", "position": {"x": 0, "y": 0}, "width": 100, "height": 100, "data": {"label": "Orders"}},
        {"id": "Customers", "position": {"x": 300, "y": 0}, "width": 100, "height": 100},
        {"id": "Products", "position": {"x": 300, "y": 50}},
    ],
    "edges": [
        {"id": "e1", "source": "Orders", "target": "Customers", "data": {"label": "Orders (* - 1) Customers"}},
        {"id": "e2", "source": "Orders", "target": "Products"},
        {"id": "e3", "source": "Orders", "target": "Missing"},
    ],
}


class TestDecode:
    def test_nodes_and_edges(self):
        nodes, edges = topology_from_dict(TOPOLOGY)
        assert [n.id for n in nodes] == ["Orders", "Customers", "Products"]
        assert (nodes[0].x, nodes[0].y, nodes[0].width, nodes[0].height) == (0, 0, 100, 100)
        assert nodes[2].width is None and nodes[2].height is None
        assert nodes[0].data == {"label": "Orders"}
        assert [(e.source, e.target) for e in edges] == [
            ("Orders", "Customers"),
            ("Orders", "Products"),
            ("Orders", "Missing"),
        ]

    def test_empty_object(self):
        assert topology_from_dict({}) == ([], [])

    def test_invalid_json(self):
        with pytest.raises(TopologyFormatError, match="invalid JSON"):
            topology_from_json("{nodes: ")

    @pytest.mark.parametrize(
        ("obj", "message"),
        [
            ([], "expected a JSON object"),
            ({"nodes": {}}, "topology.nodes"),
            ({"nodes": [{"id": "A"}]}, "nodes\\[0\\]: missing 'position'"),
            ({"nodes": [{"id": 1, "position": {"x": 0, "y": 0}}]}, "nodes\\[0\\].id"),
            ({"nodes": [{"id": "A", "position": {"x": True, "y": 0}}]}, "position.x"),
            ({"nodes": [{"id": "A", "position": {"x": 0, "y": 0}, "width": "wide"}]}, "width"),
            ({"nodes": [{"id": "A", "position": {"x": 10**400, "y": 0}}]}, "position.x: number out of range"),
            ({"nodes": [{"id": "A", "position": {"x": 0, "y": 0}, "height": float("nan")}]}, "height: number must be finite"),
            ({"nodes": [{"id": "A", "position": {"x": float("inf"), "y": 0}}]}, "position.x: number must be finite"),
            ({"edges": [{"id": "e1", "source": "A"}]}, "edges\\[0\\]: missing 'target'"),
            ({"edges": [{"id": "e1", "source": "A", "target": "B", "data": []}]}, "data"),
        ],
    )
    def test_malformed(self, obj, message):
        with pytest.raises(TopologyFormatError, match=message):
            topology_from_dict(obj)


class TestEncode:
    def test_result_shape(self):
        nodes, edges = topology_from_dict(TOPOLOGY)
        out = result_to_dict(compute_layout(nodes, edges))
        orders = out["nodes"][0]
        assert orders["position"] == {"x": 0, "y": 0}
        assert orders["data"] == {"label": "Orders"}
        assert orders["connectionPoints"] == [
            {"id": "s-Orders-Customers-e1", "role": "source", "side": "right", "offsetPercent": 33.3333},
            {"id": "s-Orders-Products-e2", "role": "source", "side": "right", "offsetPercent": 66.6667},
        ]
        assert out["edges"][0]["sourceConnectionPointId"] == "s-Orders-Customers-e1"
        assert out["edges"][0]["targetConnectionPointId"] == "t-Customers-Orders-e1"
        assert out["edges"][2]["sourceConnectionPointId"] is None
        assert out["skippedEdges"] == ["e3"]
        assert "data" not in out["nodes"][1]

    def test_compact_json(self):
        nodes, edges = topology_from_dict({"nodes": [], "edges": []})
        assert result_to_json(compute_layout(nodes, edges), indent=None) == '{"nodes": [], "edges": [], "skippedEdges": []}'


class TestLayoutJson:
    def test_round_trip_through_api(self):
        out = json.loads(layout_json(json.dumps(TOPOLOGY)))
        products = out["nodes"][2]
        assert products["width"] is None
        assert products["connectionPoints"][0]["side"] == "left"

    def test_duplicate_ids_raise(self):
        dup = {"nodes": [{"id": "A", "position": {"x": 0, "y": 0}}] * 2, "edges": []}
        with pytest.raises(DuplicateIdentifierError):
            layout_json(json.dumps(dup))
