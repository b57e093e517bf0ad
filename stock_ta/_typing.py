# -*- coding: utf-8 -*-
from decimal import Decimal
from typing import Any, Dict, Union

DictLike = Dict[str, Any]
Int = int
IntFloat = Union[int, float, Decimal, str]
