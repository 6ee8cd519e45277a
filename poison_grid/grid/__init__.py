# -*- coding: utf-8 -*-
"""
poison_grid.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : 標準入力などのテキストから Problem への変換
- board.py  : Problem から 0/1 の盤面配列を作る
"""
