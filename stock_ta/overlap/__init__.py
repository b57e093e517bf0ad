# -*- coding: utf-8 -*-
from .kama import kama
from .sma import sma

__all__ = ["kama", "sma"]
