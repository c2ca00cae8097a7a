from django.urls import path

from partsman import views

app_name = "partsman"

urlpatterns = [
    path("", views.InventoryView.as_view(), name="inventory"),
    path("parts/add/", views.PartFormView.as_view(), name="part-add"),
    path("parts/<int:part_id>/", views.PartFormView.as_view(), name="part-edit"),
    path("parts/<int:part_id>/delete/", views.PartDeleteView.as_view(), name="part-delete"),
    path("products/add/", views.ProductFormView.as_view(), name="product-add"),
    path("products/<int:product_id>/", views.ProductFormView.as_view(), name="product-edit"),
    path(
        "products/<int:product_id>/delete/",
        views.ProductDeleteView.as_view(),
        name="product-delete",
    ),
]
