from django.db import models


class Product(models.Model):
    name = models.CharField(max_length=255, verbose_name="Nombre del Producto")
    sku = models.CharField(
        max_length=60,
        unique=True,
        verbose_name="SKU",
        help_text="Identificador único del producto para búsquedas externas."
    )
    quantity = models.PositiveIntegerField(verbose_name="Cantidad en Stock")
    created_at = models.DateTimeField(auto_now_add=True, editable=False)

    class Meta:
        verbose_name = "Producto"
        verbose_name_plural = "Productos"
        ordering = ['sku']

    def __str__(self):
        return f"{self.name} ({self.sku})"
