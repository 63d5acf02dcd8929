from bright_web.app_factory import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

#############################
#
# Key design patterns used
# •	Application Factory: create_app() loads settings and wires the ApplicationFactory, ErrorHandler and blueprint.
# •	Front Controller: Application resolves ?url=<controller>/<method>/<params...> and invokes the controller.
# •	Factory: ApplicationFactory builds controller + model (storage, logger, database) + view per request.
# •	Registry: ControllerRegistry maps names to constructors and files them in a directory tree.
# •	Adapter: JsonStorage / XmlStorage behind ApplicationStorage; Database wraps pyodbc; Email wraps smtplib.
######################################################################
# Directory layout and responsibilities
# •	bright_web/app_factory.py — composition root
# •	bright_web/config/ — INI -> AppSettings
# •	bright_web/domain/ — dataclasses and the exception hierarchy (no Flask, no filesystem)
# •	bright_web/core/ — Application, ApplicationFactory, registry, base Model / View / Controller, ErrorHandler
# •	bright_web/adapters/ — storage, database, email
# •	bright_web/services/ — Logger (named log files), KeyGenerator
# •	bright_web/controllers/ — site pages: index, about, blog, error
# •	bright_web/web/routes.py — HTTP entry only: builds one Application per request
# •	bright_web/templates/ — layout.html + head/header/footer + pages/<page>.html
# •	bright_web/storage/ — data files read by the models (json/ and xml/ hold the same site)
# ________________________________________
# Runtime request flow
# •	GET /blog/view/hello-world (or /?url=blog/view/hello-world)
# •	web.path_dispatch -> Application(factory, {"url": ...})
# •	registry.find("blog") -> factory.make_controller("blog") -> BlogController.view(["hello-world"])
# •	controller pulls data files from its model, builds fragments onto the view, view renders layout.html
# •	unknown controller / method -> error controller, one line in pageNotFoundLog, 404
# •	anything else raised -> ErrorHandler: errorLog / exceptionLog, optional email, redirect to /static/error.html
# ________________________________________
