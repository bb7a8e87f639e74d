"""Tests for asset descriptors and account identifiers."""

import pytest

from stellar_horizon.assets import (
    Asset,
    AssetTypeCreditAlphaNum,
    AssetTypeCreditAlphaNum4,
    AssetTypeCreditAlphaNum12,
    AssetTypeNative,
    account_id_of,
    asset_query_params,
)

from conftest import ACCOUNT_ID, EUR_ISSUER


class TestAsset:
    """Tests for asset construction."""

    def test_native(self):
        asset = Asset.native()

        assert isinstance(asset, AssetTypeNative)
        assert asset.type == "native"

    @pytest.mark.parametrize("code, cls, asset_type", [
        ("X", AssetTypeCreditAlphaNum4, "credit_alphanum4"),
        ("EUR", AssetTypeCreditAlphaNum4, "credit_alphanum4"),
        ("USDC", AssetTypeCreditAlphaNum4, "credit_alphanum4"),
        ("EURTT", AssetTypeCreditAlphaNum12, "credit_alphanum12"),
        ("ABCDEFGHIJKL", AssetTypeCreditAlphaNum12, "credit_alphanum12"),
    ])
    def test_non_native_variant_from_code_length(self, code, cls, asset_type):
        """Test that the code length picks the variant."""
        asset = Asset.create_non_native_asset(code, EUR_ISSUER)

        assert isinstance(asset, cls)
        assert asset.type == asset_type
        assert asset.code == code
        assert asset.issuer == EUR_ISSUER

    @pytest.mark.parametrize("code", ["", "ABCDEFGHIJKLM"])
    def test_invalid_code_length(self, code):
        with pytest.raises(ValueError):
            Asset.create_non_native_asset(code, EUR_ISSUER)

    def test_direct_construction_validates(self):
        with pytest.raises(ValueError):
            AssetTypeCreditAlphaNum4("TOOLONG", EUR_ISSUER)
        with pytest.raises(ValueError):
            AssetTypeCreditAlphaNum12("EUR", EUR_ISSUER)

    def test_equality(self):
        assert Asset.native() == Asset.native()
        assert Asset.create_non_native_asset("EUR", EUR_ISSUER) == AssetTypeCreditAlphaNum4("EUR", EUR_ISSUER)

    def test_base_classes_are_abstract(self):
        """Test that only concrete variants can be constructed."""
        with pytest.raises(TypeError):
            Asset()
        with pytest.raises(TypeError):
            AssetTypeCreditAlphaNum("USD", EUR_ISSUER)


class TestAccountId:
    """Tests for account identifier handling."""

    def test_string(self):
        assert account_id_of(ACCOUNT_ID) == ACCOUNT_ID

    def test_object_with_account_id(self):
        class KeyPair:
            account_id = ACCOUNT_ID

        assert account_id_of(KeyPair()) == ACCOUNT_ID

    @pytest.mark.parametrize("account", [None, ""])
    def test_missing(self, account):
        with pytest.raises(ValueError):
            account_id_of(account)


class TestAssetQueryParams:
    """Tests for asset query parameter encoding."""

    def test_native(self):
        assert asset_query_params("buying", Asset.native()) == [("buying_asset_type", "native")]

    def test_credit(self):
        params = asset_query_params("selling", Asset.create_non_native_asset("EUR", EUR_ISSUER))

        assert params == [
            ("selling_asset_type", "credit_alphanum4"),
            ("selling_asset_code", "EUR"),
            ("selling_asset_issuer", EUR_ISSUER),
        ]

