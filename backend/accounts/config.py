from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    database_url: str | None = None
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_database: str = "accounts"
    db_port: int = 3306

    bcrypt_rounds: int = 10
    admin_dashboard_url: str = "/admin/dashboard"
    student_dashboard_url: str = "./stud.html"
    admin_username: str | None = None
    admin_password: str | None = None

    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "info"

    class Config:
        env_prefix = "ACCOUNTS_"
        env_file = ".env"

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Explicit database_url wins over the individual MySQL parameters."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )


settings = Settings()
