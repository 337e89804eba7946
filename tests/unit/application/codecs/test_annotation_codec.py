from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from scaleahead.application.codecs.annotation_codec import AnnotationCodec
from scaleahead.domain.entities.annotations import AnnotationTarget
from scaleahead.domain.entities.errors import InputFormatError
from scaleahead.domain.entities.instance import BootLatencyCache


@pytest.fixture()
def codec() -> AnnotationCodec:
    return AnnotationCodec()


@pytest.mark.parametrize(
    "annotations, expected",
    [
        ({"predictive": "true"}, True),
        ({"predictive": "True"}, False),
        ({"predictive": "false"}, False),
        ({}, False),
    ],
)
def test_is_predictive_requires_exact_true(codec, annotations, expected) -> None:
    assert codec.is_predictive(annotations) is expected


@pytest.mark.parametrize("text", [None, "", "   "])
def test_decode_window_treats_missing_value_as_empty(codec, text) -> None:
    assert codec.decode_window(text) == ()


def test_window_survives_encoding(codec, make_window) -> None:
    window = make_window((60, 10), (30, 20), (30, 25))

    decoded = codec.decode_window(codec.encode_window(window))

    assert decoded == tuple(window)


def test_encoded_window_is_a_list_of_records(codec, make_window, now) -> None:
    payload = json.loads(codec.encode_window(make_window((0, 42))))

    assert len(payload) == 1
    assert payload[0]["utilization"] == 42
    assert datetime.fromisoformat(
        payload[0]["timestamp"].replace("Z", "+00:00")
    ) == now


def test_decode_window_accepts_legacy_timestamp_keys(codec) -> None:
    legacy = json.dumps(
        [
            {'"2016-03-01T10:00:00.123456789Z"': 50},
            {'"2016-03-01T10:00:30.5-03:00"': 60},
        ]
    )

    window = codec.decode_window(legacy)

    assert [s.utilization for s in window] == [50, 60]
    assert window[0].timestamp == datetime(
        2016, 3, 1, 10, 0, 0, 123456, tzinfo=timezone.utc
    )
    assert window[1].timestamp == datetime(
        2016, 3, 1, 13, 0, 30, 500000, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"timestamp": "2024-01-01T00:00:00Z", "utilization": 1}',
        "[42]",
        '[{"timestamp": "yesterday", "utilization": 1}]',
        '[{"timestamp": "2024-01-01T00:00:00Z", "utilization": -1}]',
        '[{"\\"not a time\\"": 5}]',
    ],
)
def test_decode_window_rejects_malformed_content(codec, text) -> None:
    with pytest.raises(InputFormatError):
        codec.decode_window(text)


def test_window_patch_targets_autoscaler(codec, make_window) -> None:
    patch = codec.window_patch("web", make_window((0, 5)))

    assert patch.target == AnnotationTarget.AUTOSCALER
    assert patch.name == "web"
    assert list(patch.annotations) == ["previousCPUUtilizations"]


def test_to_instance_reads_boot_latency_cache(codec, make_instance_snapshot) -> None:
    snapshot = make_instance_snapshot(
        "web-1", boot_seconds=30.0, annotations={"InitializationTime": "30s"}
    )

    instance = codec.to_instance(snapshot)

    assert instance.name == "web-1"
    assert instance.boot_latency_cache == BootLatencyCache(value="30s")
    assert instance.ready_condition() is not None


def test_boot_latency_patch_requires_populated_cache(codec) -> None:
    patch = codec.boot_latency_patch("web-1", BootLatencyCache(value="1m0s"))

    assert patch.target == AnnotationTarget.INSTANCE
    assert dict(patch.annotations) == {"InitializationTime": "1m0s"}

    with pytest.raises(ValueError):
        codec.boot_latency_patch("web-1", BootLatencyCache())


def test_codec_honours_custom_keys(make_window) -> None:
    codec = AnnotationCodec(observations_key="obs", predictive_key="predict")

    assert codec.is_predictive({"predict": "true"})
    assert "obs" in codec.window_patch("web", make_window((0, 1))).annotations
