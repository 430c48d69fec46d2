import logging
from datetime import timedelta

import pytest

from api_session.utils import ClaimsCodec, TokenIssuer, TokenRefresher
from api_session.utils.custom_enum import TokenType
from api_session.utils.custom_exception import (
    InvalidCredentialError,
    SessionExpiredError,
)

from tests.helpers import ACCESS_TTL, REFRESH_TTL, T0


class TestTokenRefresher:
    """Tests - обновление пары токенов."""

    def test_refresh_after_access_expiry(self, issuer, refresher, codec, clock):
        tokens = issuer.issue(42)
        clock.advance(timedelta(minutes=20))

        new_tokens = refresher.refresh(
            access_token=tokens.access_token.token,
            refresh_token=tokens.refresh_token.token,
        )

        access = codec.decode(new_tokens.access_token.token)
        refresh = codec.decode(new_tokens.refresh_token.token)
        refreshed_at = T0 + timedelta(minutes=20)

        assert access.sub == refresh.sub == 42
        assert access.type is TokenType.access
        assert refresh.type is TokenType.refresh
        assert access.exp == int((refreshed_at + ACCESS_TTL).timestamp())
        assert refresh.exp == int((refreshed_at + REFRESH_TTL).timestamp())

    def test_refresh_with_unexpired_access(self, issuer, refresher, codec):
        tokens = issuer.issue(7)

        new_tokens = refresher.refresh(
            tokens.access_token.token,
            tokens.refresh_token.token,
        )

        assert codec.decode(new_tokens.access_token.token).sub == 7

    def test_refresh_after_session_expiry(self, issuer, refresher, clock):
        tokens = issuer.issue(42)
        clock.advance(timedelta(days=8))

        with pytest.raises(SessionExpiredError):
            refresher.refresh(
                tokens.access_token.token,
                tokens.refresh_token.token,
            )

    @pytest.mark.parametrize("access_token", ["", "garbage", "a.b.c"])
    def test_session_expiry_wins_over_access_state(
        self,
        issuer,
        refresher,
        clock,
        access_token,
    ):
        tokens = issuer.issue(42)
        clock.advance(REFRESH_TTL)

        with pytest.raises(SessionExpiredError):
            refresher.refresh(access_token, tokens.refresh_token.token)

    def test_subject_mismatch(self, issuer, refresher):
        tokens_a = issuer.issue(1)
        tokens_b = issuer.issue(2)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                access_token=tokens_b.access_token.token,
                refresh_token=tokens_a.refresh_token.token,
            )

    def test_swapped_tokens(self, issuer, refresher):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                access_token=tokens.refresh_token.token,
                refresh_token=tokens.access_token.token,
            )

    def test_access_token_in_both_slots(self, issuer, refresher):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                tokens.access_token.token,
                tokens.access_token.token,
            )

    def test_refresh_token_in_both_slots(self, issuer, refresher):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                tokens.refresh_token.token,
                tokens.refresh_token.token,
            )

    def test_foreign_refresh_token(self, issuer, refresher, clock):
        foreign_codec = ClaimsCodec(secret="another-secret", clock=clock)
        foreign = TokenIssuer(
            codec=foreign_codec,
            access_ttl=ACCESS_TTL,
            refresh_ttl=REFRESH_TTL,
            clock=clock,
        ).issue(42)
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                tokens.access_token.token,
                foreign.refresh_token.token,
            )

    def test_foreign_expired_refresh_token_is_invalid(
        self,
        issuer,
        refresher,
        clock,
    ):
        foreign_codec = ClaimsCodec(secret="another-secret", clock=clock)
        foreign = TokenIssuer(
            codec=foreign_codec,
            access_ttl=ACCESS_TTL,
            refresh_ttl=REFRESH_TTL,
            clock=clock,
        ).issue(42)
        tokens = issuer.issue(42)
        clock.advance(timedelta(days=8))

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                tokens.access_token.token,
                foreign.refresh_token.token,
            )

    def test_foreign_access_token(self, issuer, refresher, clock):
        foreign_codec = ClaimsCodec(secret="another-secret", clock=clock)
        foreign = TokenIssuer(
            codec=foreign_codec,
            access_ttl=ACCESS_TTL,
            refresh_ttl=REFRESH_TTL,
            clock=clock,
        ).issue(42)
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                foreign.access_token.token,
                tokens.refresh_token.token,
            )

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "x.y.z.w"])
    def test_malformed_refresh_token(self, issuer, refresher, token):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(tokens.access_token.token, token)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "x.y.z.w"])
    def test_malformed_access_token(self, issuer, refresher, token):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(token, tokens.refresh_token.token)

    @pytest.mark.parametrize("suffix", ["!!", "~~", "$$$"])
    def test_refresh_token_with_junk_suffix(self, issuer, refresher, suffix):
        tokens = issuer.issue(42)

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                tokens.access_token.token,
                tokens.refresh_token.token + suffix,
            )

    def test_tampered_access_payload(self, issuer, refresher):
        tokens = issuer.issue(42)
        header, payload, signature = tokens.access_token.token.split(".")
        other_payload = issuer.issue(43).access_token.token.split(".")[1]

        with pytest.raises(InvalidCredentialError):
            refresher.refresh(
                f"{header}.{other_payload}.{signature}",
                tokens.refresh_token.token,
            )

    def test_used_refresh_token_stays_valid(self, issuer, refresher, clock):
        tokens = issuer.issue(42)
        clock.advance(timedelta(minutes=20))
        refresher.refresh(
            tokens.access_token.token,
            tokens.refresh_token.token,
        )

        clock.advance(timedelta(minutes=1))
        again = refresher.refresh(
            tokens.access_token.token,
            tokens.refresh_token.token,
        )

        assert again.access_token.token != tokens.access_token.token

    def test_bad_signature_logged(self, issuer, refresher, clock, caplog):
        foreign_codec = ClaimsCodec(secret="another-secret", clock=clock)
        foreign = TokenIssuer(
            codec=foreign_codec,
            access_ttl=ACCESS_TTL,
            refresh_ttl=REFRESH_TTL,
            clock=clock,
        ).issue(42)
        tokens = issuer.issue(42)

        with caplog.at_level(logging.WARNING, logger="api_session"):
            with pytest.raises(InvalidCredentialError):
                refresher.refresh(
                    tokens.access_token.token,
                    foreign.refresh_token.token,
                )

        assert "signature mismatch" in caplog.text

    def test_from_settings(self, settings):
        settings.ACCESS_TOKEN_EXP_MIN = 5
        settings.REFRESH_TOKEN_EXP_DAYS = 2
        tokens = TokenIssuer.from_settings().issue(9)

        new_tokens = TokenRefresher.from_settings().refresh(
            tokens.access_token.token,
            tokens.refresh_token.token,
        )

        assert new_tokens.access_token.ttl == 5 * 60
        assert new_tokens.refresh_token.ttl == 2 * 24 * 60 * 60
