from marketplace.models import Role, User


def test_role_ordering_is_total():
    assert Role.ADMIN.at_least(Role.MANAGER)
    assert Role.ADMIN.at_least(Role.CUSTOMER)
    assert Role.MANAGER.at_least(Role.CUSTOMER)
    assert not Role.CUSTOMER.at_least(Role.MANAGER)
    assert not Role.MANAGER.at_least(Role.ADMIN)
    assert sorted(Role, key=lambda r: r.rank) == [Role.CUSTOMER, Role.MANAGER, Role.ADMIN]


def test_elevated_roles():
    assert not Role.CUSTOMER.is_elevated
    assert Role.MANAGER.is_elevated
    assert Role.ADMIN.is_elevated


def test_parse_is_lenient():
    assert Role.parse("Customer") is Role.CUSTOMER
    assert Role.parse(" admin ") is Role.ADMIN
    assert Role.parse("owner") is None
    assert Role.parse(None) is None


def test_user_role_property():
    user = User(name="x", password="y", latitude=0, longitude=0, type="Manager")
    assert user.role is Role.MANAGER
