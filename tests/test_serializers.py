from app.serializers import serialize_time_buckets


def test_pairs_keep_their_order():
    assert serialize_time_buckets([("2024-01", 5), ("2024-02", 0)]) == [
        {"timeBucket": "2024-01", "count": 5},
        {"timeBucket": "2024-02", "count": 0},
    ]


def test_descending_input_is_not_resorted():
    buckets = [("2024-03", 1), ("2023-12", 7), ("2024-01", 2)]
    assert [r["timeBucket"] for r in serialize_time_buckets(buckets)] == ["2024-03", "2023-12", "2024-01"]


def test_mappings_and_generators():
    rows = ({"timeBucket": label, "count": n} for label, n in [("2024-05-01", 3)])
    assert serialize_time_buckets(rows) == [{"timeBucket": "2024-05-01", "count": 3}]


def test_empty():
    assert serialize_time_buckets([]) == []
