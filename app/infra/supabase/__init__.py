"""Supabase infrastructure module"""
from .client import create_auth_client, get_supabase_client, reset_supabase_client

__all__ = ['get_supabase_client', 'create_auth_client', 'reset_supabase_client']
