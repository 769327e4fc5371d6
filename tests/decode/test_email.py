import pytest

from punydecode.decode.email import decode_email
from punydecode.decode.hostname import decode_hostname
from punydecode.errors.types import InvalidInputError, NoAtSignInEmailError


def test_domain_is_decoded() -> None:
    assert decode_email("user@xn----7sbhfccwe7ahoby0si.xn--p1ai") == "user@единая-мордовия.рф"


def test_local_part_is_kept_verbatim() -> None:
    assert (
        decode_email("ЛюбимыйРуководитель@xn----7sbhfccwe7ahoby0si.xn--p1ai")
        == "ЛюбимыйРуководитель@единая-мордовия.рф"
    )
    # The local part is never punycode-decoded, even when it looks prefixed.
    assert decode_email("xn--bcher-kva@xn--bcher-kva.de") == "xn--bcher-kva@bücher.de"


def test_splits_on_first_at_sign() -> None:
    domain = "b@xn--maana-pta.com"
    assert decode_email("a@" + domain) == "a@" + decode_hostname(domain)


@pytest.mark.parametrize("address", ["noatsign", ""])
def test_missing_at_sign(address: str) -> None:
    with pytest.raises(NoAtSignInEmailError) as excinfo:
        decode_email(address)
    assert str(excinfo.value) == "no at sign in the e-mail address"


def test_domain_errors_propagate() -> None:
    with pytest.raises(InvalidInputError):
        decode_email("admin@xn--UB4")
