"""Template engine and contract services"""
