"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.demo_chart, name="demo_chart"),
    path("charts/demo/", views.demo_chart, name="charts_demo"),
    path("charts/line.svg", views.line_chart_svg, name="line_chart_svg"),
    path("api/charts/line/", views.line_chart_geometry_api, name="line_chart_geometry_api"),
]
