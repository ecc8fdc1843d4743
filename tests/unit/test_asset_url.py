"""
Unit tests for tagscan.utils.asset_url
"""
from tagscan.utils.asset_url import (
    ASSET_ID_WIDTH,
    DEFAULT_ASSET_URL_TEMPLATE,
    build_asset_url,
    pad_asset_id,
)


class TestPadAssetId:
    def test_pads_to_twelve_digits(self):
        assert pad_asset_id("123") == "000000000123"
        assert len(pad_asset_id("1")) == ASSET_ID_WIDTH

    def test_leading_zeros_do_not_change_value(self):
        assert pad_asset_id("00123") == pad_asset_id("123")

    def test_all_zeros(self):
        assert pad_asset_id("0000") == "000000000000"

    def test_long_tag_not_truncated(self):
        tag = "12345678901234567890"
        assert pad_asset_id(tag) == tag


class TestBuildAssetUrl:
    def test_default_template(self):
        assert build_asset_url("12345") == (
            "https://assets.example.com/asset/000000012345?view=details&source=scan"
        )

    def test_none_tag_gives_none(self):
        assert build_asset_url(None) is None

    def test_equivalent_tags_share_url(self):
        assert build_asset_url("00042") == build_asset_url("42")

    def test_deterministic(self):
        assert build_asset_url("555") == build_asset_url("555")

    def test_custom_template(self):
        url = build_asset_url("7", "https://inventory.test/item/{tag}")
        assert url == "https://inventory.test/item/000000000007"

    def test_default_template_has_placeholder(self):
        assert "{tag}" in DEFAULT_ASSET_URL_TEMPLATE
