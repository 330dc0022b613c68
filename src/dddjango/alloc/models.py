from typing import Set
from django.db import models
from allocation.domain import model as domain_


class Product(models.Model):
    sku = models.CharField(max_length=255, primary_key=True)

    class Meta:
        app_label = 'alloc'


    @classmethod
    def from_domain(cls, product: domain_.Product) -> 'Product':
        orm_product = cls.objects.create(sku=product.sku)
        for batch in product.batches:
            Batch.from_domain(batch, orm_product)
        return orm_product


    def to_domain(self) -> domain_.Product:
        return domain_.Product(
            self.sku,
            [batch.to_domain() for batch in self.batches.all()]
        )


class Batch(models.Model):
    ref = models.CharField(max_length=255)
    product = models.ForeignKey(to=Product, on_delete=models.CASCADE, related_name='batches')
    qty = models.IntegerField()
    eta = models.DateField(blank=True, null=True)

    class Meta:
        app_label = 'alloc'
        # rows are recreated in list order on every save
        ordering = ['id']
        # references identify a batch within its product only
        constraints = [
            models.UniqueConstraint(fields=['product', 'ref'], name='unique_batch_ref_per_product'),
        ]


    @classmethod
    def from_domain(cls, batch: domain_.Batch, orm_product: Product) -> 'Batch':
        orm_batch = cls.objects.create(
            ref=batch.reference,
            product=orm_product,
            qty=batch.purchased_qty,
            eta=batch.eta,
        )
        Allocation.objects.bulk_create(
            Allocation(batch=orm_batch, order_id=line.order_id,
                       sku=line.sku, qty=line.qty)
            for line in batch.allocations
        )
        return orm_batch


    def to_domain(self) -> domain_.Batch:

        domain_batch = domain_.Batch(
            self.ref, self.product.sku, self.qty, self.eta
        )
        for line in Allocation.allocations_to_domain(self):
            domain_batch.allocate(line)

        return domain_batch


class Allocation(models.Model):
    batch = models.ForeignKey(Batch, on_delete=models.CASCADE, related_name='allocations')
    order_id = models.CharField(max_length=255)
    sku = models.CharField(max_length=255)
    qty = models.IntegerField()

    class Meta:
        app_label = 'alloc'


    @staticmethod
    def allocations_to_domain(batch: Batch) -> Set[domain_.OrderLine]:
        return {
            domain_.OrderLine(line.order_id, line.sku, line.qty)
            for line in batch.allocations.all()
        }
