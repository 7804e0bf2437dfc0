from dataclasses import dataclass, field


@dataclass
class RegistryDiagnostics:
    discovered: int = 0
    parsed: int = 0
    rejected: int = 0
    duplicates: int = 0
    errors: list[str] = field(default_factory=list)

    def record_discovered(self, count: int) -> None:
        self.discovered += count

    def record_parsed(self) -> None:
        self.parsed += 1

    def record_rejection(self, error: str) -> None:
        self.rejected += 1
        self.errors.append(error)

    def record_duplicate(self, error: str) -> None:
        self.duplicates += 1
        self.record_rejection(error)

    def has_problems(self) -> bool:
        return self.rejected > 0

    def summary(self) -> dict[str, int]:
        return {
            "discovered": self.discovered,
            "parsed": self.parsed,
            "rejected": self.rejected,
            "duplicates": self.duplicates,
            "errors": len(self.errors),
        }

    def as_dict(self) -> dict:
        payload: dict = dict(self.summary())
        payload["errors"] = list(self.errors)
        return payload
