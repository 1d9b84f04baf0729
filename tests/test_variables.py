from rustdrill.lessons import variables


def test_variables1_prints_its_value(capsys):
    value = variables.variables1()
    assert value == 5
    assert capsys.readouterr().out == f"x has the value {value}\n"


def test_variables2_says_ten(capsys):
    assert variables.variables2() == "Ten!"
    assert capsys.readouterr().out == "Ten!\n"


def test_variables3_prints_each_assignment(capsys):
    values = variables.variables3()
    out = capsys.readouterr().out.splitlines()
    assert out == [f"Number {v}" for v in values]
    assert len(values) == 2
    assert values[0] != values[1]


def test_variables4_prints_value(capsys):
    value = variables.variables4()
    assert value == 10
    assert capsys.readouterr().out == f"Number {value}\n"


def test_variables5_shadows(capsys):
    total = variables.variables5()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Spell a Number : T-H-R-E-E"
    assert lines[1] == f"Number plus two is : {total}"


def test_variables6_uses_constant(capsys):
    assert variables.variables6() == variables.NUMBER
    assert variables.NUMBER == 3
    assert capsys.readouterr().out == f"Number {variables.NUMBER}\n"