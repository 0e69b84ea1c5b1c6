from django.urls import path
from . import views

app_name = 'pvz'

urlpatterns = [
    # GET  /pvz                                - Nested listing paged over products
    # POST /pvz                                - Create pickup point
    path('pvz', views.PickupPointListCreateView.as_view(), name='pvz-list'),

    # pvz_id stays a plain string so malformed ids get a 400, not a routing 404
    path('pvz/<str:pvz_id>/close_last_reception', views.CloseLastReceptionView.as_view(),
         name='close-last-reception'),
    path('pvz/<str:pvz_id>/delete_last_product', views.DeleteLastProductView.as_view(),
         name='delete-last-product'),

    path('receptions', views.ReceptionCreateView.as_view(), name='reception-create'),
    path('products', views.ProductCreateView.as_view(), name='product-create'),
]
