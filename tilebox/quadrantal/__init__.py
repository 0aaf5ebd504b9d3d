"""Playfield layout, drawing helpers and palette for a falling-block puzzle game."""