from scoutcookies.model import Scout


def test_create_scout_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["create-scout", "--email", "New@Troop.org", "--password", "pw123456", "--name", "Juniper"])
    assert result.exit_code == 0
    assert "Scout created" in result.output

    with app.app_context():
        assert Scout.query.filter_by(email="new@troop.org").one().name == "Juniper"

    again = runner.invoke(args=["create-scout", "--email", "new@troop.org", "--password", "x", "--name", "Dup"])
    assert again.exit_code != 0
    assert "Email already registered" in again.output
