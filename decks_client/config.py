from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    host: str = "127.0.0.1"
    port: int = 8080
    timeout: float = 10.0
    tls: bool = False
    base_path: str = ""

    def url_for(self, path: str) -> str:
        prefix = self.base_path.strip("/")
        if not prefix:
            return path
        return f"/{prefix}{path}"
