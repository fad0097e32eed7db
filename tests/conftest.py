import pytest

PLAINTEXT = (
    "в начале было слово, и слово было у бога, и слово было бог. "
    "оно было в начале у бога. все через него начало быть, "
    "и без него ничто не начало быть, что начало быть. "
    "в нем была жизнь, и жизнь была свет человеков!"
)


@pytest.fixture
def plaintext() -> str:
    return PLAINTEXT


@pytest.fixture
def write(tmp_path):
    def _write(name: str, text: str):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


ONEGIN = (
    "мой дядя самых честных правил, когда не в шутку занемог, "
    "он уважать себя заставил и лучше выдумать не мог. "
    "его пример другим наука; но, боже мой, какая скука "
    "с больным сидеть и день и ночь, не отходя ни шагу прочь! "
    "какое низкое коварство полуживого забавлять, "
    "ему подушки поправлять, печально подносить лекарство, "
    "вздыхать и думать про себя: когда же черт возьмет тебя! "
    "так думал молодой повеса, летя в пыли на почтовых, "
    "всевышней волею зевеса наследник всех своих родных."
)


@pytest.fixture
def other_passage() -> str:
    return ONEGIN
