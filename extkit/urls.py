"""
URL configuration for extkit project.

Les assets publiés sont servis par WhiteNoise; aucune vue n'est exposée ici.
"""
from django.urls import URLPattern

urlpatterns: list[URLPattern] = []
