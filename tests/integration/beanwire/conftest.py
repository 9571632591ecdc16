import textwrap

import pytest

SHOP_MODULES = {
    "beanwire_shop/__init__.py": "",
    "beanwire_shop/infrastructure.py": """
        class Database:
            def __init__(self, *, dsn):
                self.dsn = dsn


        class SmtpMailer:
            def __init__(self, *, sender):
                self.sender = sender
                self.outbox = []

            def send(self, to, subject):
                self.outbox.append((to, subject))
        """,
    "beanwire_shop/services/__init__.py": "",
    "beanwire_shop/services/user.py": """
        class RepositoryService:
            def __init__(self, *, database):
                self.database = database


        class SignupService:
            def __init__(self, *, repository, mailer):
                self.repository = repository
                self.mailer = mailer

            def run(self, email):
                self.mailer.send(email, "welcome")
                return email


        class BanService:
            def __init__(self, *, repository):
                self.repository = repository
        """,
}


@pytest.fixture
def shop_package(tmp_path, monkeypatch):
    """Write an importable ``beanwire_shop`` package and put it on sys.path."""
    for relative, source in SHOP_MODULES.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source))
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path
