"""请求参数来源适配.

目标:
- 把 query/path/body 三份输入统一成只读 mapping,缺省的来源视为空.
- 兼容普通 dict 与 Werkzeug MultiDict(form/query): 单值保持标量,重复出现的 key 收敛为 list.

注意:
- 本模块只负责 "取参形状",不做类型校验与转换,校验交由 ParamsSanitizer 完成.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from flask import has_request_context
from flask import request as current_request

from params_sanitizer.constants import Location

if TYPE_CHECKING:
    from flask import Request

    from params_sanitizer.types.structures import MutablePayloadDict, PayloadMapping

_EMPTY: PayloadMapping = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RequestInputs:
    """一次请求的三份参数输入."""

    query: PayloadMapping = field(default_factory=lambda: _EMPTY)
    path: PayloadMapping = field(default_factory=lambda: _EMPTY)
    body: PayloadMapping = field(default_factory=lambda: _EMPTY)

    def for_location(self, location: Location) -> PayloadMapping:
        """返回指定位置的输入 mapping."""
        return getattr(self, location.value)

    @classmethod
    def from_mappings(
        cls,
        query: object | None = None,
        path: object | None = None,
        body: object | None = None,
    ) -> RequestInputs:
        """从 dict 或 MultiDict 兼容对象构造输入,None 视为空."""
        return cls(
            query=_to_mapping(query),
            path=_to_mapping(path),
            body=_to_mapping(body),
        )


def _to_mapping(payload: object | None) -> PayloadMapping:
    if payload is None:
        return _EMPTY
    if hasattr(payload, "getlist"):
        return _flatten_multidict(payload)
    if isinstance(payload, Mapping):
        return payload
    raise TypeError("参数输入必须为 mapping 或 MultiDict 兼容对象")


def _flatten_multidict(payload: object) -> MutablePayloadDict:
    multi_dict = cast(Any, payload)
    flattened: MutablePayloadDict = {}
    for key in list(multi_dict.keys()):
        values = list(multi_dict.getlist(key) or [])
        if not values:
            flattened[key] = None
        elif len(values) == 1:
            flattened[key] = values[0]
        else:
            flattened[key] = values
    return flattened


def inputs_from_flask_request(request: Request | None = None) -> RequestInputs:
    """从 Flask 请求中提取 query/path/body 三份输入.

    Args:
        request: Flask 请求对象,缺省时使用当前请求上下文.

    Returns:
        RequestInputs: body 优先取 JSON 对象,否则取表单.

    Raises:
        RuntimeError: 未传入 request 且不在请求上下文中.

    """
    if request is None:
        if not has_request_context():
            raise RuntimeError("inputs_from_flask_request 需要在请求上下文中调用")
        request = cast("Request", current_request)

    body: object | None
    if request.is_json:
        body = request.get_json(silent=True)
        if not isinstance(body, Mapping):
            body = None
    else:
        body = request.form

    return RequestInputs.from_mappings(
        query=request.args,
        path=request.view_args,
        body=body,
    )


__all__ = ["RequestInputs", "inputs_from_flask_request"]
