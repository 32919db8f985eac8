from peewee import AutoField, DateField, Model, TextField


class TaskModel(Model):
    # Sin base de datos propia: el repositorio la enlaza con `Database.bind`.
    id = AutoField()
    title = TextField()
    description = TextField(null=True)
    due_date = DateField(null=True)
    status = TextField(null=True)

    class Meta:
        table_name = "MANAGEMENT"
