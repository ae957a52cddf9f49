import os
import json
from typing import Optional, Dict, Any
from pydantic import BaseModel

class WordPressConfig(BaseModel):
    site_url: str = "http://localhost"
    username: str = "admin"
    app_password: str = ""
    timeout: float = 30.0

    @property
    def api_base(self) -> str:
        return f"{self.site_url.rstrip('/')}/wp-json/wp/v2"

class ServerConfig(BaseModel):
    random_seed: Optional[int] = None
    strict_arguments: bool = True
    log_level: str = "INFO"

class Config(BaseModel):
    wordpress: WordPressConfig = WordPressConfig()
    server: ServerConfig = ServerConfig()

    @classmethod
    def load(cls, config_path: str = "config.json") -> "Config":
        data: Dict[str, Any] = {}
        if not os.path.exists(config_path):
            # Look next to the package as well, common when running from a checkout
            parent_config = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config.json")
            if os.path.exists(parent_config):
                config_path = parent_config
            else:
                config_path = None

        if config_path:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

        # Handle env var overrides
        wp_data = data.get("wordpress", {})
        wp_data["site_url"] = os.getenv("WORDPRESS_SITE_URL", wp_data.get("site_url", "http://localhost"))
        wp_data["username"] = os.getenv("WORDPRESS_USERNAME", wp_data.get("username", "admin"))
        wp_data["app_password"] = os.getenv("WORDPRESS_APP_PASSWORD", wp_data.get("app_password", ""))
        wp_data["timeout"] = float(os.getenv("WORDPRESS_TIMEOUT", wp_data.get("timeout", 30.0)))

        server_data = data.get("server", {})
        seed = os.getenv("SEO_RANDOM_SEED")
        if seed not in (None, ""):
            server_data["random_seed"] = int(seed)
        strict = os.getenv("SEO_STRICT_ARGUMENTS")
        if strict not in (None, ""):
            server_data["strict_arguments"] = strict.strip().lower() not in ("0", "false", "no", "off")
        server_data["log_level"] = os.getenv("SEO_LOG_LEVEL", server_data.get("log_level", "INFO"))

        data["wordpress"] = wp_data
        data["server"] = server_data
        return cls(**data)

    def mask_secrets(self) -> Dict[str, Any]:
        """Return a dict representation with secrets masked for logging."""
        d = self.model_dump()
        if d.get("wordpress", {}).get("app_password"):
            d["wordpress"]["app_password"] = "***"
        return d
