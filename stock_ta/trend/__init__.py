# -*- coding: utf-8 -*-
from .psar import psar

__all__ = ["psar"]
