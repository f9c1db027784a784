"""Time Manager - tasks, work timer and a personal ledger for a dashboard"""
