import pytest

from cyrcaesar.classical import CaesarCipher, encrypt_text
from cyrcaesar.core.errors import InvalidKeyError, MissingSampleError


@pytest.fixture
def cipher():
    return CaesarCipher()


def test_encrypt_decrypt_validate_key(cipher):
    assert cipher.decrypt(cipher.encrypt("мир", "5"), 5) == "мир"
    with pytest.raises(InvalidKeyError):
        cipher.encrypt("мир", 40)


def test_crack_lists_every_key(cipher):
    results = cipher.crack(encrypt_text("мир", 3))
    assert [r.key for r in results] == list(range(40))
    assert results[3].plaintext == "мир"


def test_brute_force_recovers_plaintext(cipher):
    pt = "привет, мир!"
    found = cipher.brute_force(encrypt_text(pt, 5), "мир")
    assert found is not None
    assert found.key == 5
    assert found.plaintext == pt


def test_brute_force_prefers_lowest_key(cipher):
    # Every decryption of text without alphabet symbols is identical.
    found = cipher.brute_force("123", "2")
    assert found.key == 0


@pytest.mark.parametrize("sample", [None, ""])
def test_brute_force_without_sample(cipher, sample):
    assert cipher.brute_force(encrypt_text("мир", 2), sample) is None


def test_brute_force_no_match(cipher):
    assert cipher.brute_force(encrypt_text("мир", 2), "Мир") is None


def test_statistical_recovers_key(cipher, plaintext):
    ct = encrypt_text(plaintext, 17)
    best = cipher.statistical(ct, plaintext * 2)
    assert best.key == 17
    assert best.plaintext == plaintext
    assert best.distance == pytest.approx(0.0)


def test_rank_keys_sorted_by_distance(cipher, plaintext):
    ranked = cipher.rank_keys(encrypt_text(plaintext, 9), plaintext)
    assert len(ranked) == 40
    assert ranked[0].key == 9
    distances = [r.distance for r in ranked]
    assert distances == sorted(distances)


def test_rank_keys_ties_go_to_lowest_key(cipher):
    ranked = cipher.rank_keys("123", "абв")
    assert [r.key for r in ranked] == list(range(40))
    assert cipher.statistical("123", "абв").key == 0


@pytest.mark.parametrize("sample", [None, "", "123ABC"])
def test_statistical_requires_usable_sample(cipher, sample):
    with pytest.raises(MissingSampleError):
        cipher.statistical("абв", sample)


@pytest.mark.parametrize("key", range(40))
def test_statistical_recovers_key_from_different_sample(cipher, plaintext, other_passage, key):
    best = cipher.statistical(encrypt_text(other_passage, key), plaintext)
    assert best.key == key
    assert best.plaintext == other_passage
    assert best.distance > 0.0


def test_solve_result_to_dict(cipher, plaintext, other_passage):
    row = cipher.rank_keys(encrypt_text(other_passage, 6), plaintext)[0].to_dict()
    assert row["cipher_name"] == "caesar"
    assert row["key"] == 6
    assert row["plaintext"] == other_passage
    assert row["score"] == -row["distance"]
