"""
Configuracion central de la integracion.
Gestiona variables de entorno para las credenciales de Lark y el logging.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


LARK_DOMAINS = {
    "lark": "https://open.larksuite.com",
    "feishu": "https://open.feishu.cn",
}


class Settings(BaseSettings):
    """
    Clase de configuracion de la integracion.
    Lee variables de entorno (o .env) y proporciona valores por defecto.

    Las credenciales quedan vacias por defecto: la validacion ocurre al
    construir el cliente o al pedir el app token, no al importar el modulo.
    """

    # Credenciales de la app de Lark (self-built app)
    LARK_APP_ID: str = Field(default="")
    LARK_APP_SECRET: str = Field(default="")

    # Base destino y tabla ATS
    LARK_BASE_APP_TOKEN: str = Field(default="")
    LARK_ATS_TABLE_ID: str = Field(default="")

    # 'lark' (internacional), 'feishu' (China) o una URL completa
    LARK_DOMAIN: str = Field(default="lark")
    LARK_HTTP_TIMEOUT: int = Field(default=30)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @computed_field
    @property
    def lark_base_url(self) -> str:
        """
        Retorna la URL base de la Open API segun LARK_DOMAIN.
        Si el valor no es un alias conocido se usa tal cual como URL.
        """
        domain = self.LARK_DOMAIN.strip()
        return LARK_DOMAINS.get(domain.lower(), domain).rstrip("/")

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


# Instancia global de configuracion
settings = Settings()
