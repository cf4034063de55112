from create_template.cli import create_template_command

if __name__ == "__main__":
    create_template_command(prog_name="create-template")
