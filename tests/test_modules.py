from rustdrill.lessons.modules import favorite_snacks, make_sausage


def test_make_sausage(capsys):
    assert make_sausage() == "sausage!"
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks(capsys):
    text = favorite_snacks()
    assert text == "favorite snacks: Pear and Cucumber"
    assert capsys.readouterr().out == text + "\n"