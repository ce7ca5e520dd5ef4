import pytest

from pipeline_setup.multisite import run_multisite_menu, SUGGESTED_SITES


@pytest.fixture
def choose(mocker):
    def _choose(value):
        return mocker.patch('pipeline_setup.multisite.ask', return_value=value)
    return _choose


def all_hostnames():
    return [host for hosts in SUGGESTED_SITES.values() for host in hosts]


def test_menus_list_site_types_and_methods(choose, capsys):
    choose('A')
    run_multisite_menu()

    out = capsys.readouterr().out
    for name in ['Technology Blog', 'Business News', 'Health & Wellness',
                 'Travel & Lifestyle', 'Custom Site']:
        assert name in out
    for letter in 'ABC':
        assert f"  {letter}. " in out


def test_choice_a_prints_local_sites(choose, capsys):
    choose('A')

    assert run_multisite_menu() == 'A'

    out = capsys.readouterr().out
    printed = [host for host in all_hostnames() if host in out]
    assert printed == SUGGESTED_SITES['A']
    assert len(printed) == 4


@pytest.mark.parametrize('choice', ['B', 'C'])
def test_other_branches_print_their_sites(choose, capsys, choice):
    choose(choice)

    assert run_multisite_menu() == choice

    out = capsys.readouterr().out
    assert [host for host in all_hostnames() if host in out] == SUGGESTED_SITES[choice]


def test_lowercase_choice_is_accepted(choose):
    choose(' b ')
    assert run_multisite_menu() == 'B'


def test_unrecognized_choice_prints_no_sites(choose, capsys):
    choose('Z')

    assert run_multisite_menu() is None

    out = capsys.readouterr().out
    assert 'Setup methods:' in out
    assert 'Suggested sites:' not in out
    assert not any(host in out for host in all_hostnames())
