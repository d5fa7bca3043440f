# -*- coding: utf-8 -*-
"""Módulos de dominio del gateway (auth, webhooks, checkout, catalog)."""
