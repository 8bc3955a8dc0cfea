from campus.services.session import DemoSession


def test_static_person_is_built_once():
    lines = []
    session = DemoSession(out=lines.append)

    first = session.static_object_demo()
    second = session.static_object_demo()

    assert first == second == "Hi, I'm StaticUser, age 99, ID 999."
    assert session.static_person is session.static_person
    assert session.population.count == 1
    assert lines.count("Parameterized constructor called for StaticUser") == 1


def test_session_scope_releases_everything():
    lines = []
    with DemoSession(out=lines.append) as session:
        session.static_person
        assert session.population.count == 1
    assert session.population.count == 0
    assert lines[-1] == "Destructor of Person called for StaticUser"
