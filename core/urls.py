# core/urls.py
from django.urls import path
from core import views


urlpatterns = [
    path("", views.index, name="index"),
    path("refuelings", views.refuelings, name="refuelings"),
    path("refuelings/new", views.new_refueling, name="new_refueling"),
    path("refuelings/export.csv", views.export_refuelings, name="export_refuelings"),
    path("refuelings/<int:pk>", views.refueling, name="refueling"),
    path("refuelings/<int:pk>/edit", views.edit_refueling, name="edit_refueling"),
]
