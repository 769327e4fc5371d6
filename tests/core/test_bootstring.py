import pytest

from punydecode.core import bootstring
from punydecode.core.bootstring import adapt, basic_to_digit, decode_label
from punydecode.errors.types import DecodeError, InvalidInputError, NotBasicError, PunycodeOverflowError


# RFC 3492 section 7.1 sample strings plus a few lenient-ASCII cases.
_SAMPLES = [
    ("", ""),
    ("Bach-", "Bach"),
    ("tda", "ü"),
    ("4can8av2009b", "üëäö♥"),
    ("bcher-kva", "bücher"),
    (
        "Willst du die Blthe des frhen, die Frchte des spteren Jahres-x9e96lkal",
        "Willst du die Blüthe des frühen, die Früchte des späteren Jahres",
    ),
    ("egbpdaj6bu4bxfgehfvwxn", "ليهمابتكلموشعربي؟"),
    ("ihqwcrb4cv8a8dqg056pqjye", "他们为什么不说中文"),
    ("ihqwctvzc91f659drss3x8bo0yb", "他們爲什麽不說中文"),
    ("Proprostnemluvesky-uyb24dma41a", "Pročprostěnemluvíčesky"),
    ("4dbcagdahymbxekheh6e0a7fei0b", "למההםפשוטלאמדבריםעברית"),
    ("i1baa7eci9glrd9b2ae1bj0hfcgg6iyaf8o0a1dig0cd", "यहलोगहिन्दीक्योंनहींबोलसकतेहैं"),
    ("n8jok5ay5dzabd5bym9f0cm5685rrjetr6pdxa", "なぜみんな日本語を話してくれないのか"),
    (
        "989aomsvi5e83db1d2a355cv1e0vak1dwrv93d5xbh15a0dt30a5jpsd879ccm6fea98c",
        "세계의모든사람들이한국어를이해한다면얼마나좋을까",
    ),
    ("b1abfaaepdrnnbgefbadotcwatmq2g4l", "почемужеонинеговорятпорусски"),
    ("PorqunopuedensimplementehablarenEspaol-fmd56a", "PorquénopuedensimplementehablarenEspañol"),
    ("TisaohkhngthchnitingVit-kjcr8268qyxafd2f1b9g", "TạisaohọkhôngthểchỉnóitiếngViệt"),
    ("3B-ww4c5e180e575a65lsy2b", "3年B組金八先生"),
    ("-with-SUPER-MONKEYS-pc58ag80a8qai00g7n9n", "安室奈美恵-with-SUPER-MONKEYS"),
    ("Hello-Another-Way--fc4qua05auwb3674vfr0b", "Hello-Another-Way-それぞれの場所"),
    ("2-u9tlzr9756bt3uc0v", "ひとつ屋根の下2"),
    ("MajiKoi5-783gue6qz075azm5e", "MajiでKoiする5秒前"),
    ("de-jg4avhby1noc0d", "パフィーdeルンバ"),
    ("d9juau41awczczp", "そのスピードで"),
    ("-> $1.00 <--", "-> $1.00 <-"),
    ("bcher-KVA", "bücher"),
]


@pytest.mark.parametrize("encoded, expected", _SAMPLES)
def test_decode_label_matches_reference_output(encoded: str, expected: str) -> None:
    assert decode_label(encoded) == expected


@pytest.mark.parametrize(
    "encoded, error",
    [
        ("\\%&", PunycodeOverflowError),
        ("0000000d000000w00000xb", PunycodeOverflowError),
        ("ква-kva", NotBasicError),
        ("UB4", InvalidInputError),
    ],
)
def test_decode_label_error_kinds(encoded: str, error: type) -> None:
    with pytest.raises(error) as excinfo:
        decode_label(encoded)
    assert isinstance(excinfo.value, DecodeError)
    assert excinfo.value.input == encoded


def test_lone_delimiter_decodes_to_empty() -> None:
    assert decode_label("-") == ""


def test_uppercase_digits_decode_like_lowercase() -> None:
    assert decode_label("EGBPDAJ6BU4BXFGEHFVWXN") == decode_label("egbpdaj6bu4bxfgehfvwxn")
    assert decode_label("Proprostnemluvesky-UYB24DMA41A") == "Pročprostěnemluvíčesky"


def test_output_is_not_lowercased() -> None:
    assert decode_label("Bach-") == "Bach"
    assert decode_label("MajiKoi5-783gue6qz075azm5e").startswith("Maji")


def test_not_basic_reports_offset_of_first_non_ascii() -> None:
    with pytest.raises(NotBasicError) as excinfo:
        decode_label("abé-kva")
    assert excinfo.value.position == 2


def test_non_ascii_in_extended_portion_is_an_invalid_digit() -> None:
    with pytest.raises(PunycodeOverflowError):
        decode_label("bcher-kvé")


def test_bytes_input_is_read_per_byte() -> None:
    assert decode_label(b"bcher-kva") == "bücher"
    with pytest.raises(NotBasicError):
        decode_label("ква-kva".encode("utf-8"))


def test_code_point_past_unicode_range_becomes_replacement_character() -> None:
    # deltas sum to 3523136, giving n = 3523264 > U+10FFFF
    assert decode_label("bb09z") == bootstring.REPLACEMENT_CHARACTER


def test_basic_to_digit_table() -> None:
    assert basic_to_digit("a") == 0
    assert basic_to_digit("A") == 0
    assert basic_to_digit("z") == 25
    assert basic_to_digit("Z") == 25
    assert basic_to_digit("0") == 26
    assert basic_to_digit("9") == 35
    for ch in ("-", "%", " ", "é"):
        assert basic_to_digit(ch) == bootstring.BASE


def test_adapt_known_values() -> None:
    assert adapt(0, 1, True) == 0
    assert adapt(1000, 1, True) == 1
    assert adapt(10000, 2, False) == 66


def test_max_int_is_signed_32_bit_ceiling() -> None:
    assert bootstring.MAX_INT == 2**31 - 1


def test_constants_follow_rfc_3492() -> None:
    assert (bootstring.BASE, bootstring.TMIN, bootstring.TMAX) == (36, 1, 26)
    assert (bootstring.SKEW, bootstring.DAMP) == (38, 700)
    assert (bootstring.INITIAL_BIAS, bootstring.INITIAL_N) == (72, 128)
