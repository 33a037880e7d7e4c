from envmanager.domain.environments import compare_environments, rules
from envmanager.domain.environments.model import Environment, InstalledApp


def _env(name: str, apps: list[InstalledApp]) -> Environment:
    return Environment.new(tenant_id="t1", name=name, installed_apps=apps)


def test_every_row_has_one_cell_per_environment():
    """Rows carry one cell per compared environment, in input order."""
    envs = [
        _env("A", [InstalledApp.new("x", "X", "1.0", "Contoso")]),
        _env("B", [InstalledApp.new("y", "Y", "1.0", "Contoso")]),
        _env("C", []),
    ]

    comparison = compare_environments(envs)

    assert comparison.environments == tuple(envs)
    for row in comparison.rows:
        assert len(row.cells) == len(envs)
        assert set(row.present_in) | set(row.missing_in) == {0, 1, 2}
        assert row.category in rules.CATEGORY_RANK


def test_differing_fields_use_known_field_names():
    envs = [
        _env("A", [InstalledApp.new("x", "X", "1.0", "Contoso", "tenant")]),
        _env("B", [InstalledApp.new("x", "X2", "2.0", "Fabrikam", "global")]),
    ]

    row = compare_environments(envs).rows[0]

    assert row.differing_fields == rules.COMPARED_FIELDS
