from django.db import models

# Create your models here.
class StoredCollection(models.Model):
    key = models.CharField(max_length=100, primary_key=True)
    payload = models.TextField(default='[]')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.key
