"""校验报告与转换结果结构.

每次调用都会新建结果对象,不在调用之间共享.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from params_sanitizer.constants import LOCATIONS, Location


@dataclass(slots=True)
class LocationReport:
    """按参数位置分组的字段名列表(字段名为带父级路径的限定名)."""

    query: list[str] = field(default_factory=list)
    path: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    def for_location(self, location: Location) -> list[str]:
        """返回指定位置的列表(可变,供构建报告时追加)."""
        return getattr(self, location.value)

    def add(self, location: Location, qualified_name: str) -> None:
        """向指定位置追加一个字段名."""
        self.for_location(location).append(qualified_name)

    def extend(self, other: LocationReport) -> None:
        """按位置拼接另一份报告,不去重."""
        for location in LOCATIONS:
            self.for_location(location).extend(other.for_location(location))

    def contains(self, location: Location, qualified_name: str) -> bool:
        """判断指定位置是否已记录该字段."""
        return qualified_name in self.for_location(location)

    def is_empty(self) -> bool:
        """三个位置都没有记录时返回 True."""
        return not (self.query or self.path or self.body)

    def count(self) -> int:
        """返回三个位置的记录总数."""
        return len(self.query) + len(self.path) + len(self.body)

    def to_dict(self) -> dict[str, list[str]]:
        """序列化为 ``{"query": [...], "path": [...], "body": [...]}``."""
        return {location.value: list(self.for_location(location)) for location in LOCATIONS}


@dataclass(slots=True)
class CheckResult:
    """参数校验报告.

    Attributes:
        missing: 缺失的必填字段.
        unknown: 未定义的字段(仅严格模式记录).
        malformed: 值不符合声明类型的字段.

    """

    missing: LocationReport = field(default_factory=LocationReport)
    unknown: LocationReport = field(default_factory=LocationReport)
    malformed: LocationReport = field(default_factory=LocationReport)

    @property
    def status(self) -> bool:
        """三类问题都为空时校验通过."""
        return self.missing.is_empty() and self.unknown.is_empty() and self.malformed.is_empty()

    def merge(self, other: CheckResult) -> None:
        """把嵌套字段的校验结果拼接到当前报告."""
        self.missing.extend(other.missing)
        self.unknown.extend(other.unknown)
        self.malformed.extend(other.malformed)

    def to_dict(self) -> dict[str, Any]:
        """序列化为可直接返回给客户端的结构."""
        return {
            "status": self.status,
            "missing": self.missing.to_dict(),
            "unknown": self.unknown.to_dict(),
            "malformed": self.malformed.to_dict(),
        }


@dataclass(slots=True)
class ValueResult:
    """按参数位置分组的转换结果,键为顶层字段名."""

    query: dict[str, Any] = field(default_factory=dict)
    path: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def for_location(self, location: Location) -> dict[str, Any]:
        """返回指定位置的结果字典."""
        return getattr(self, location.value)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """序列化为 ``{"query": {...}, "path": {...}, "body": {...}}``."""
        return {location.value: dict(self.for_location(location)) for location in LOCATIONS}
