"""params-sanitizer: 按声明式字段定义校验并转换请求参数.

主要入口:
- ParamsSanitizer: 构造时归一化字段定义,``check`` 返回校验报告,``values`` 返回转换结果
- RequestInputs: query/path/body 三份输入
- validate_params: Flask 路由装饰器
"""

from params_sanitizer.constants import FieldType, Location
from params_sanitizer.errors import AppError, PayloadParseError, SchemaDefinitionError, ValidationError
from params_sanitizer.schemas import (
    BooleanField,
    CheckResult,
    DateField,
    FieldDefinition,
    LocationReport,
    NumberField,
    ObjectField,
    StringField,
    ValueResult,
    apply_defaults,
    normalize_definitions,
)
from params_sanitizer.services.sanitizer import ParamsSanitizer, check_params, coerce_params
from params_sanitizer.settings import APP_VERSION
from params_sanitizer.utils.decorators import validate_params
from params_sanitizer.utils.request_inputs import RequestInputs, inputs_from_flask_request

__version__ = APP_VERSION

__all__ = [
    "AppError",
    "BooleanField",
    "CheckResult",
    "DateField",
    "FieldDefinition",
    "FieldType",
    "Location",
    "LocationReport",
    "NumberField",
    "ObjectField",
    "ParamsSanitizer",
    "PayloadParseError",
    "RequestInputs",
    "SchemaDefinitionError",
    "StringField",
    "ValidationError",
    "ValueResult",
    "__version__",
    "apply_defaults",
    "check_params",
    "coerce_params",
    "inputs_from_flask_request",
    "normalize_definitions",
    "validate_params",
]
