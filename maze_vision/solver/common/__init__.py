#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共定义：常量与异常
"""
