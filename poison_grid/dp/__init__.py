# -*- coding: utf-8 -*-
"""
poison_grid.dp パッケージ

勝ちテーブル（dp）を最終行から上に向かって埋める後退 DP をまとめています。
- evaluator.py : 最終行の初期化と、各行の漸化式による計算
"""
